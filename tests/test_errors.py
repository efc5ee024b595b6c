#!/usr/bin/env python3
"""Tests unitaires pour le module errors."""

import io
import unittest
from unittest.mock import MagicMock

from linux_ini_utils.errors.base import ErrorHandler, ErrorHandlerChain
from linux_ini_utils.errors.exceptions import (ApplicationError,
                                               ConfigurationError,
                                               EmptyValueRejectedError,
                                               IniError,
                                               IniFileNotFoundError,
                                               IniIntegrityError,
                                               IniIOError,
                                               KeyNotFoundError,
                                               NameValidationError,
                                               PolicyConfigurationError,
                                               SectionNotFoundError,
                                               ValidationError)
from linux_ini_utils.errors.console_handler import ConsoleErrorHandler
from linux_ini_utils.errors.logger_handler import LoggerErrorHandler


class TestExceptions(unittest.TestCase):
    """Tests de la hiérarchie d'exceptions."""

    def test_hierarchy(self):
        self.assertTrue(issubclass(IniError, ApplicationError))
        self.assertTrue(issubclass(SectionNotFoundError, IniError))
        self.assertTrue(issubclass(NameValidationError, ValidationError))
        self.assertTrue(
            issubclass(PolicyConfigurationError, ConfigurationError)
        )

    def test_file_not_found_message(self):
        error = IniFileNotFoundError("/etc/a.conf")
        self.assertEqual(str(error), "Fichier non trouvé : /etc/a.conf")
        self.assertEqual(error.path, "/etc/a.conf")

    def test_key_not_found_attributes(self):
        error = KeyNotFoundError("dev", "PORT", "a.conf")
        self.assertEqual((error.section, error.key), ("dev", "PORT"))
        self.assertIn("PORT", str(error))

    def test_name_validation_attributes(self):
        error = NameValidationError("a b", "key", "whitespace", "espaces")
        self.assertEqual(error.rule, "whitespace")
        self.assertEqual(error.kind, "key")
        self.assertEqual(str(error), "espaces")

    def test_integrity_issues_default(self):
        self.assertEqual(IniIntegrityError("doublons").issues, [])


class TestConsoleErrorHandler(unittest.TestCase):
    """Tests pour ConsoleErrorHandler."""

    def setUp(self):
        self.stream = io.StringIO()
        self.handler = ConsoleErrorHandler(stream=self.stream)

    def _output(self, error: Exception) -> str:
        self.handler.handle(error)
        return self.stream.getvalue()

    def test_implements_error_handler(self):
        self.assertIsInstance(self.handler, ErrorHandler)

    def test_handle_file_not_found(self):
        """Vérifie le message pour IniFileNotFoundError."""
        output = self._output(IniFileNotFoundError("a.conf"))
        self.assertIn("🛑 IniFileNotFoundError: Fichier non trouvé : a.conf",
                      output)
        self.assertIn("🔧 Solution : Vérifiez le chemin du fichier INI.",
                      output)

    def test_handle_missing_key(self):
        output = self._output(KeyNotFoundError("dev", "PORT", "a.conf"))
        self.assertIn("list-sections, list-keys", output)

    def test_handle_empty_value(self):
        """EmptyValueRejectedError a une solution propre."""
        output = self._output(EmptyValueRejectedError("vide"))
        self.assertIn("allow_empty_values", output)

    def test_handle_validation_error(self):
        output = self._output(
            NameValidationError("a=b", "key", "illegal_characters", "interdit")
        )
        self.assertIn("mode strict", output)

    def test_handle_io_error(self):
        output = self._output(IniIOError("disque plein"))
        self.assertIn("permissions et l'espace disque", output)

    def test_handle_integrity_error(self):
        output = self._output(IniIntegrityError("2 doublon(s)"))
        self.assertIn("en double", output)

    def test_handle_subclass_matches_parent(self):
        """PolicyConfigurationError hérite de ConfigurationError."""
        output = self._output(PolicyConfigurationError("politique invalide"))
        self.assertIn("Vérifiez votre fichier de configuration.", output)

    def test_custom_solution_has_priority(self):
        handler = ConsoleErrorHandler(
            solutions={IniIOError: "Relancez avec sudo."},
            stream=self.stream,
        )
        handler.handle(IniIOError("refusé"))
        self.assertIn("🔧 Solution : Relancez avec sudo.",
                      self.stream.getvalue())

    def test_handle_unknown_error(self):
        """Vérifie le message pour une erreur inconnue."""
        output = self._output(RuntimeError("erreur inconnue"))
        self.assertIn("💥 Erreur inattendue: erreur inconnue", output)
        self.assertIn("Type: RuntimeError", output)


class TestLoggerErrorHandler(unittest.TestCase):
    """Tests pour LoggerErrorHandler."""

    def setUp(self):
        self.mock_logger = MagicMock()
        self.handler = LoggerErrorHandler(self.mock_logger)

    def test_handle_known_error(self):
        """Vérifie le log pour une erreur connue."""
        error = IniIOError("disque plein")
        self.handler.handle(error)
        self.mock_logger.log_error.assert_called_once_with(
            "IniIOError: disque plein"
        )

    def test_handle_lookup_error_as_warning(self):
        """Une clé absente est tracée en warning."""
        error = SectionNotFoundError("dev", "a.conf")
        self.handler.handle(error)
        self.mock_logger.log_warning.assert_called_once()
        self.mock_logger.log_error.assert_not_called()

    def test_handle_unknown_error(self):
        """Vérifie le log pour une erreur inconnue."""
        error = RuntimeError("runtime error")
        self.handler.handle(error)
        self.mock_logger.log_error.assert_called_once_with(
            "Erreur inattendue: RuntimeError: runtime error"
        )


class TestErrorHandlerChain(unittest.TestCase):
    """Tests pour ErrorHandlerChain."""

    def test_handle_calls_all_handlers(self):
        """Vérifie que tous les handlers sont appelés."""
        chain = ErrorHandlerChain()
        handler1 = MagicMock()
        handler2 = MagicMock()
        chain.add_handler(handler1)
        chain.add_handler(handler2)

        error = RuntimeError("test")
        chain.handle(error)

        handler1.handle.assert_called_once_with(error)
        handler2.handle.assert_called_once_with(error)

    def test_handlers_given_at_construction(self):
        handler = MagicMock()
        chain = ErrorHandlerChain([handler])

        chain.handle(IniIOError("x"))

        handler.handle.assert_called_once()

    def test_handle_and_exit(self):
        """Vérifie que handle_and_exit appelle sys.exit."""
        chain = ErrorHandlerChain()
        handler = MagicMock()
        chain.add_handler(handler)

        error = RuntimeError("test")
        with self.assertRaises(SystemExit) as ctx:
            chain.handle_and_exit(error, exit_code=2)

        self.assertEqual(ctx.exception.code, 2)
        handler.handle.assert_called_once_with(error)


if __name__ == '__main__':
    unittest.main()
