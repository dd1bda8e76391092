"""ログ出力のテスト

CodecLoggerの動作を検証するテストスイート。
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from minipng.decoder import Block
from minipng.logger import CodecLogger, LogConfig, VerboseLevel
from minipng.text_import import import_text

if TYPE_CHECKING:
    from pytest import CaptureFixture


class TestLogConfig:
    """LogConfig設定クラスのテスト"""

    def test_default_values(self) -> None:
        config = LogConfig()
        assert config.verbose_level == VerboseLevel.NORMAL
        assert config.log_file is None


class TestVerboseLevel:
    """VerboseLevelのテスト"""

    def test_level_ordering(self) -> None:
        assert VerboseLevel.QUIET < VerboseLevel.NORMAL < VerboseLevel.VERBOSE < VerboseLevel.DEBUG

    @pytest.mark.parametrize(
        "count, expected",
        [
            pytest.param(0, VerboseLevel.NORMAL, id="正常系: 指定なし"),
            pytest.param(1, VerboseLevel.VERBOSE, id="正常系: -v"),
            pytest.param(2, VerboseLevel.DEBUG, id="正常系: -vv"),
            pytest.param(5, VerboseLevel.DEBUG, id="正常系: 上限で丸める"),
        ],
    )
    def test_from_count(self, count: int, expected: VerboseLevel) -> None:
        assert VerboseLevel.from_count(count) == expected


class TestCodecLogger:
    """CodecLoggerクラスのテスト"""

    @pytest.mark.parametrize(
        "level, method, expected_output",
        [
            pytest.param(VerboseLevel.NORMAL, "info", True, id="info: NORMALで出力"),
            pytest.param(VerboseLevel.QUIET, "info", False, id="info: QUIETで出力なし"),
            pytest.param(VerboseLevel.VERBOSE, "verbose", True, id="verbose: VERBOSEで出力"),
            pytest.param(VerboseLevel.NORMAL, "verbose", False, id="verbose: NORMALで出力なし"),
            pytest.param(VerboseLevel.DEBUG, "debug", True, id="debug: DEBUGで出力"),
            pytest.param(VerboseLevel.VERBOSE, "debug", False, id="debug: VERBOSEで出力なし"),
            pytest.param(VerboseLevel.NORMAL, "warning", True, id="warning: NORMALで出力"),
            pytest.param(VerboseLevel.QUIET, "warning", False, id="warning: QUIETで出力なし"),
        ],
    )
    def test_level_filtering(
        self,
        capsys: CaptureFixture[str],
        level: VerboseLevel,
        method: str,
        expected_output: bool,
    ) -> None:
        """レベルに応じてメッセージが出力される"""
        logger = CodecLogger(LogConfig(verbose_level=level))
        getattr(logger, method)("テストメッセージ")
        captured = capsys.readouterr()
        assert ("テストメッセージ" in captured.out) == expected_output

    def test_error_always_outputs_to_stderr(self, capsys: CaptureFixture[str]) -> None:
        logger = CodecLogger(LogConfig(verbose_level=VerboseLevel.QUIET))
        logger.error("エラーメッセージ")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "エラー: エラーメッセージ" in captured.err

    def test_log_image_verbose_level(self, capsys: CaptureFixture[str]) -> None:
        logger = CodecLogger(LogConfig(verbose_level=VerboseLevel.VERBOSE))
        logger.log_image(Path("dir/image.mp"), import_text("XX\nXX"))
        captured = capsys.readouterr()
        assert "image.mp" in captured.out
        assert "2x2" in captured.out
        assert "BLACK_AND_WHITE" in captured.out

    def test_log_blocks_debug_level(self, capsys: CaptureFixture[str]) -> None:
        logger = CodecLogger(LogConfig(verbose_level=VerboseLevel.DEBUG))
        logger.log_blocks([Block("H", b"\x00" * 9), Block("D", b"\x00")])
        captured = capsys.readouterr()
        assert "H: 9 bytes" in captured.out
        assert "D: 1 bytes" in captured.out

    def test_log_file(self, tmp_path: Path) -> None:
        """ログファイルにはANSIエスケープを除去して全レベルが書き込まれる"""
        log_file = tmp_path / "minipng.log"
        config = LogConfig(verbose_level=VerboseLevel.QUIET, log_file=log_file)

        with CodecLogger(config) as logger:
            logger.debug("\x1b[31m赤いメッセージ\x1b[0m")
            logger.info("情報")

        content = log_file.read_text(encoding="utf-8")
        assert "DEBUG: 赤いメッセージ" in content
        assert "INFO: 情報" in content
        assert "\x1b[" not in content
