"""Tests pour le module logging."""

import io
import logging

from linux_ini_utils.logging import ConsoleLogger, FileLogger, Logger


class TestFileLogger:
    """Tests pour FileLogger."""

    def test_implements_logger_interface(self, tmp_path):
        """Vérifie que FileLogger implémente l'interface Logger."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        assert isinstance(logger, Logger)

    def test_log_info(self, tmp_path):
        """Test du logging info."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_info("Test message")

        content = log_file.read_text()
        assert "INFO" in content
        assert "Test message" in content

    def test_log_warning(self, tmp_path):
        """Test du logging warning."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_warning("Warning message")

        content = log_file.read_text()
        assert "WARNING" in content
        assert "Warning message" in content

    def test_log_error(self, tmp_path):
        """Test du logging error."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_error("Error message")

        content = log_file.read_text()
        assert "ERROR" in content
        assert "Error message" in content

    def test_debug_filtered_by_default(self, tmp_path):
        """Le niveau par défaut est INFO."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_debug("Debug message")

        assert "Debug message" not in log_file.read_text()

    def test_creates_log_directory(self, tmp_path):
        """Test que le répertoire de log est créé si nécessaire."""
        log_file = tmp_path / "subdir" / "test.log"

        logger = FileLogger(str(log_file))
        logger.log_info("Test")

        assert log_file.exists()

    def test_config_from_policy_file(self, tmp_path):
        """La table [logging] fixe le niveau et le format."""
        log_file = tmp_path / "test.log"
        config = {
            "ini": {"strict": True},
            "logging": {
                "level": "debug",
                "format": "%(levelname)s - %(message)s"
            }
        }

        logger = FileLogger(str(log_file), config=config)
        logger.log_debug("Test")

        content = log_file.read_text()
        assert "DEBUG - Test" in content

    def test_utf8_encoding(self, tmp_path):
        """Test de l'encodage UTF-8."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_info("Clé 'PORT' écrite dans [dév]")

        content = log_file.read_text(encoding='utf-8')
        assert "[dév]" in content

    def test_console_output_active(self, tmp_path):
        """FileLogger avec console_output=True crée un StreamHandler."""
        log_file = str(tmp_path / "console.log")
        logger = FileLogger(log_file, console_output=True)

        assert len(logger.logger.handlers) == 2
        assert logger.logger.propagate is False

    def test_handler_reused_for_same_file(self, tmp_path):
        """Deux FileLogger sur le même fichier partagent le handler."""
        log_file = str(tmp_path / "shared.log")
        logger1 = FileLogger(log_file)
        logger2 = FileLogger(log_file)

        assert logger2.handler is logger1.handler
        assert len(logger2.logger.handlers) == 1


class TestConsoleLogger:
    """Tests pour ConsoleLogger."""

    def test_writes_to_stream(self):
        stream = io.StringIO()
        logger = ConsoleLogger(stream=stream, name="test.console.stream")

        logger.log_warning("attention")

        assert stream.getvalue() == "WARNING: attention\n"

    def test_level_filters_info(self):
        stream = io.StringIO()
        logger = ConsoleLogger(stream=stream, name="test.console.level")

        logger.log_info("bavard")

        assert stream.getvalue() == ""

    def test_verbose_level(self):
        stream = io.StringIO()
        logger = ConsoleLogger(level="INFO", stream=stream,
                               name="test.console.verbose")

        logger.log_info("bavard")
        logger.log_debug("très bavard")

        assert stream.getvalue() == "INFO: bavard\n"

    def test_handlers_replaced_on_reuse(self):
        """Recréer le logger ne duplique pas les messages."""
        first = io.StringIO()
        second = io.StringIO()
        ConsoleLogger(stream=first, name="test.console.reuse")
        logger = ConsoleLogger(stream=second, name="test.console.reuse")

        logger.log_error("une fois")

        assert first.getvalue() == ""
        assert second.getvalue() == "ERROR: une fois\n"
        assert len(logging.getLogger("test.console.reuse").handlers) == 1
