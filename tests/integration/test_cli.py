"""
Integration tests for the command-line interface.

Drives the click commands end to end: argument, file and stdin input,
output formats, configuration files and error reporting.
"""

import json

import pytest
import yaml
from click.testing import CliRunner

from unibreak import __version__
from unibreak.cli import main
import unibreak.logging_config as logging_module
from unibreak.logging_config import LogLevel, configure_logging


@pytest.mark.integration
class TestBreaksCommand:
    """Test the breaks command."""

    def setup_method(self):
        """Set up a CLI runner."""
        self.runner = CliRunner()

    def teardown_method(self):
        """Restore quiet logging after each CLI invocation."""
        configure_logging(level='minimal', console_output=False, file_output=False, collect_performance=False)

    def test_words(self):
        """Test breaking text given as arguments."""
        result = self.runner.invoke(main, ['-q', 'breaks', 'hello', 'world'])

        assert result.exit_code == 0
        assert 'token: "hello", class: AL, action: PROHIBITED' in result.output
        assert 'token: " ", class: SP, action: INDIRECT' in result.output
        assert 'token: "world", class: AL, action: EXPLICIT' in result.output

    def test_no_classes(self):
        """Test the short text format."""
        result = self.runner.invoke(main, ['-q', 'breaks', '--no-classes', 'hello', 'world'])

        assert result.exit_code == 0
        assert '"hello" PROHIBITED' in result.output
        assert 'class:' not in result.output

    def test_json_format(self):
        """Test JSON output."""
        result = self.runner.invoke(main, ['-q', 'breaks', '--format', 'json', 'hello', 'world'])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [item['text'] for item in data] == ['hello', ' ', 'world']
        assert data[1] == {'text': ' ', 'class': 'SP', 'action': 'INDIRECT'}

    def test_yaml_format(self):
        """Test YAML output."""
        result = self.runner.invoke(main, ['-q', 'breaks', '--format', 'yaml', 'a(b'])

        assert result.exit_code == 0
        data = yaml.safe_load(result.stdout)
        assert [item['class'] for item in data] == ['AL', 'OP', 'AL']
        assert data[-1]['action'] == 'EXPLICIT'

    def test_stdin(self):
        """Test reading text from stdin."""
        result = self.runner.invoke(main, ['-q', 'breaks'], input='a\nb')

        assert result.exit_code == 0
        assert 'token: "\\n", class: LF, action: MANDATORY' in result.output
        assert 'token: "b", class: AL, action: EXPLICIT' in result.output

    def test_file(self, tmp_path):
        """Test reading text from a file in small blocks."""
        path = tmp_path / 'input.txt'
        path.write_bytes('crème brûlée\r\n'.encode('utf-8'))

        result = self.runner.invoke(main, ['-q', 'breaks', '--file', str(path), '--block-size', '2',
                                           '--format', 'json'])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert ''.join(item['text'] for item in data) == 'crème brûlée\r\n'
        assert [item['action'] for item in data[-2:]] == ['PROHIBITED', 'MANDATORY']

    def test_words_and_file_conflict(self, tmp_path):
        """Test WORDS and --file cannot be combined."""
        path = tmp_path / 'input.txt'
        path.write_text('text', encoding='utf-8')

        result = self.runner.invoke(main, ['-q', 'breaks', '--file', str(path), 'words'])

        assert result.exit_code != 0
        assert 'not both' in result.output

    def test_config_file(self, tmp_path):
        """Test settings from a configuration file."""
        config_path = tmp_path / 'config.yaml'
        config_path.write_text('output_format: json\nshow_classes: false\n', encoding='utf-8')

        result = self.runner.invoke(main, ['-q', 'breaks', '--config', str(config_path), 'hi'])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [{'text': 'hi', 'class': 'AL', 'action': 'EXPLICIT'}]

    def test_command_line_overrides_config(self, tmp_path):
        """Test command-line options win over the configuration file."""
        config_path = tmp_path / 'config.json'
        config_path.write_text(json.dumps({'output_format': 'json'}), encoding='utf-8')

        result = self.runner.invoke(main, ['-q', 'breaks', '--config', str(config_path),
                                           '--format', 'text', 'hi'])

        assert result.exit_code == 0
        assert 'token: "hi", class: AL, action: EXPLICIT' in result.output

    def test_config_log_level(self, tmp_path):
        """Test the config file sets the log level unless a flag does."""
        config_path = tmp_path / 'config.yaml'
        config_path.write_text('log_level: silent\n', encoding='utf-8')

        result = self.runner.invoke(main, ['breaks', '--config', str(config_path), 'hi'])
        assert result.exit_code == 0
        assert logging_module._logger.config.level is LogLevel.SILENT

        result = self.runner.invoke(main, ['-v', 'breaks', '--config', str(config_path), 'hi'])
        assert result.exit_code == 0
        assert logging_module._logger.config.level is LogLevel.VERBOSE

    def test_invalid_config(self, tmp_path):
        """Test unknown configuration keys are reported."""
        config_path = tmp_path / 'config.yaml'
        config_path.write_text('line_width: 10\n', encoding='utf-8')

        result = self.runner.invoke(main, ['-q', 'breaks', '--config', str(config_path), 'hi'])

        assert result.exit_code == 1
        assert 'Unknown configuration keys: line_width' in result.output

    def test_invalid_block_size(self):
        """Test a non-positive block size is rejected."""
        result = self.runner.invoke(main, ['-q', 'breaks', '--block-size', '0', 'hi'])

        assert result.exit_code == 1
        assert 'block_size' in result.output

    def test_invalid_utf8_file(self, tmp_path):
        """Test undecodable input is reported as an error."""
        path = tmp_path / 'bad.txt'
        path.write_bytes(b'ok \xff\xfe')

        result = self.runner.invoke(main, ['-q', 'breaks', '--file', str(path)])

        assert result.exit_code == 1
        assert 'Invalid utf-8 input' in result.output

    def test_log_file(self, tmp_path):
        """Test verbose timings are written to the log file."""
        log_file = tmp_path / 'unibreak.log'

        result = self.runner.invoke(main, ['-v', '--log-file', str(log_file), 'breaks', 'hi'])

        assert result.exit_code == 0
        configure_logging(level='minimal', console_output=False, file_output=False)
        assert 'breaks:' in log_file.read_text(encoding='utf-8')


@pytest.mark.integration
class TestInspectionCommands:
    """Test the classify and classes commands."""

    def setup_method(self):
        """Set up a CLI runner."""
        self.runner = CliRunner()

    def teardown_method(self):
        """Restore quiet logging after each CLI invocation."""
        configure_logging(level='minimal', console_output=False, file_output=False, collect_performance=False)

    def test_version(self):
        """Test the version option."""
        result = self.runner.invoke(main, ['--version'])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_classify(self):
        """Test per-character classification output."""
        result = self.runner.invoke(main, ['-q', 'classify', 'a1 '])

        assert result.exit_code == 0
        assert 'U+0061  AL  LATIN SMALL LETTER A' in result.output
        assert 'U+0031  NU  DIGIT ONE' in result.output
        assert 'U+0020  SP  SPACE' in result.output

    def test_classes(self):
        """Test listing the break classes."""
        result = self.runner.invoke(main, ['-q', 'classes'])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == ' 0  OP'
        assert lines[-1] == '33  XX'
        assert len(lines) == 34

    def test_classes_with_ranges(self):
        """Test range counts per class."""
        result = self.runner.invoke(main, ['-q', 'classes', '--ranges'])

        assert result.exit_code == 0
        assert '28  SP  1 ranges, 1 code points' in result.output
        assert '33  XX  0 ranges, 0 code points' in result.output
