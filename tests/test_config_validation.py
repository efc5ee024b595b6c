"""Tests pour la validation Pydantic de la politique INI."""

import json
import tempfile
import unittest

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from linux_ini_utils.config import (
    FileConfigLoader,
    IniPolicy,
    IniPolicySettings,
    validate_with_schema,
)


class PolicyFile(BaseModel):
    """Fichier de politique complet : tables [ini] et [logging]."""

    model_config = {"extra": "forbid"}

    ini: IniPolicySettings = IniPolicySettings()
    logging: dict[str, str] = {}


class TestIniPolicySettings(unittest.TestCase):
    """Tests du modèle IniPolicySettings."""

    def test_defaults_match_policy(self):
        self.assertEqual(IniPolicySettings().to_policy(), IniPolicy())

    def test_string_booleans_coerced(self):
        """Les variables d'environnement arrivent sous forme de texte."""
        settings = IniPolicySettings.model_validate(
            {"strict": "1", "allow_empty_values": "false"}
        )
        self.assertTrue(settings.strict)
        self.assertFalse(settings.allow_empty_values)

    def test_extra_field_rejected(self):
        with self.assertRaises(PydanticValidationError):
            IniPolicySettings.model_validate({"strict": True, "mode": "x"})

    def test_non_boolean_rejected(self):
        with self.assertRaises(PydanticValidationError):
            IniPolicySettings.model_validate({"strict": "peut-être"})


class TestFileConfigLoaderWithSchema(unittest.TestCase):
    """Tests FileConfigLoader.load() avec schema Pydantic."""

    def setUp(self):
        self.loader = FileConfigLoader()

    def _write_json(self, data: dict) -> str:
        """Ecrit un fichier JSON temporaire et retourne le chemin."""
        f = tempfile.NamedTemporaryFile(
            mode="w", suffix=".json", delete=False
        )
        json.dump(data, f)
        f.close()
        return f.name

    def test_load_without_schema_returns_dict(self):
        """Sans schema, load() retourne un dict brut."""
        path = self._write_json({"ini": {"strict": True}})
        result = self.loader.load(path)
        self.assertEqual(result, {"ini": {"strict": True}})

    def test_load_policy_file_schema(self):
        """Avec schema, retourne une instance du modèle."""
        path = self._write_json({
            "ini": {"strict": True},
            "logging": {"level": "DEBUG"},
        })
        result = self.loader.load(path, schema=PolicyFile)
        self.assertIsInstance(result, PolicyFile)
        self.assertEqual(result.ini.to_policy(), IniPolicy(strict=True))
        self.assertEqual(result.logging["level"], "DEBUG")

    def test_load_with_unknown_table_raises(self):
        path = self._write_json({"ini": {}, "inni": {}})
        with self.assertRaises(PydanticValidationError):
            self.loader.load(path, schema=PolicyFile)

    def test_load_non_basemodel_raises_type_error(self):
        """Passer un type non-BaseModel lève TypeError."""
        path = self._write_json({"key": "value"})
        with self.assertRaises(TypeError):
            self.loader.load(path, schema=dict)

    def test_validate_with_string_schema_raises_type_error(self):
        """Passer une chaîne comme schema lève TypeError."""
        with self.assertRaises(TypeError):
            validate_with_schema({}, "IniPolicySettings")


if __name__ == "__main__":
    unittest.main()
