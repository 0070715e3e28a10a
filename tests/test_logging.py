"""
Tests for the ComprehensiveLogger console/file setup.
"""

from task_store.config import ConfigProperties
from task_store.utils import ComprehensiveLogger, get_logger


class TestComprehensiveLogger:

    def teardown_method(self):
        ComprehensiveLogger.initialize(**ConfigProperties.get_logging_config())

    def test_file_handler_writes_message_with_extra(self, tmp_path):
        ComprehensiveLogger.initialize(log_folder=str(tmp_path), enable_console=False, enable_file=True)
        logger = get_logger("task_store.tests.file")
        logger.info("Task criada", extra={"task_id": "server_1"})
        logger.flush()

        content = (tmp_path / "task_store.tests.file.log").read_text(encoding="utf-8")
        assert 'Task criada | {"task_id": "server_1"}' in content

    def test_initialize_rebuilds_existing_loggers(self, tmp_path):
        logger = get_logger("task_store.tests.rebuild")
        ComprehensiveLogger.initialize(log_folder=str(tmp_path), enable_console=False, enable_file=False)
        rebuilt = get_logger("task_store.tests.rebuild")
        assert rebuilt is not logger
        assert rebuilt.logger.handlers == []

    def test_level_override(self):
        logger = get_logger("task_store.tests.level", level="warning")
        assert logger.logger.level == 30
