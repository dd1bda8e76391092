"""CLI entry point for Mini-PNG."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.text import Text

from minipng import __version__
from minipng.config import ConfigError, MiniPNGConfig, find_config
from minipng.decoder import BlockReader, decode
from minipng.errors import MiniPNGError
from minipng.exporter import export_png
from minipng.files import read_bytes, read_text, write_image
from minipng.logger import CodecLogger, LogConfig, VerboseLevel
from minipng.renderer import Renderer
from minipng.text_import import import_text, split_lines
from minipng.types import ExitCode

app = typer.Typer(help="Mini-PNG画像を表示・作成するCLIツール")
console = Console()

VerboseOption = Annotated[int, typer.Option("-v", "--verbose", count=True, help="詳細ログ出力")]
LogFileOption = Annotated[Path | None, typer.Option(help="ログファイル出力先")]
ConfigOption = Annotated[
    Path | None, typer.Option("--config", help="設定ファイル（省略時は ./minipng.yml）")
]


def _resolve_config(config_path: Path | None) -> MiniPNGConfig:
    """設定を読み込む。失敗した場合は終了コード2で終了する"""
    try:
        return find_config(config_path)
    except ConfigError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(ExitCode.INVALID_INPUT) from e


def _create_logger(verbose: int, log_file: Path | None) -> CodecLogger:
    return CodecLogger(
        LogConfig(verbose_level=VerboseLevel.from_count(verbose), log_file=log_file)
    )


@app.command("display")
def display_command(
    paths: Annotated[list[Path], typer.Argument(help="Mini-PNGファイルのパス")],
    verbose: VerboseOption = 0,
    log_file: LogFileOption = None,
    config_path: ConfigOption = None,
) -> None:
    """Mini-PNG画像の情報とピクセルを表示する"""
    config = _resolve_config(config_path)
    output_console = Console(no_color=not config.output.use_color, highlight=False)
    renderer = Renderer(glyph=config.render.glyph)

    with _create_logger(verbose, log_file) as logger:
        for path in paths:
            try:
                data = read_bytes(path)
                image = decode(data)
                rendered = renderer.render(image)
            except MiniPNGError as e:
                logger.error(str(e))
                raise typer.Exit(ExitCode.ERROR) from e

            logger.log_image(path, image)
            logger.log_blocks(list(BlockReader(data)))
            output_console.print(Text.from_ansi(rendered), soft_wrap=True)


@app.command("encode")
def encode_command(
    input_path: Annotated[Path, typer.Argument(help="テキスト画像（空白と'X'）のパス")],
    output: Annotated[Path, typer.Option("-o", "--output", help="出力Mini-PNGパス")],
    verbose: VerboseOption = 0,
    log_file: LogFileOption = None,
) -> None:
    """テキスト画像から白黒のMini-PNG画像を作成する"""
    with _create_logger(verbose, log_file) as logger:
        try:
            text = read_text(input_path)
            image = import_text(text)
            size = write_image(image, output)
        except MiniPNGError as e:
            logger.error(str(e))
            raise typer.Exit(ExitCode.ERROR) from e

        if len({len(line) for line in split_lines(text)}) > 1:
            logger.warning(f"短い行は幅{image.width}まで空白で補完されました")
        logger.log_image(input_path, image)
        logger.info(f"作成完了: {output} ({size} bytes)")


@app.command("export")
def export_command(
    input_path: Annotated[Path, typer.Argument(help="Mini-PNGファイルのパス")],
    output: Annotated[
        Path | None, typer.Option("-o", "--output", help="出力PNGパス（省略時は拡張子を.pngに変更）")
    ] = None,
    verbose: VerboseOption = 0,
    log_file: LogFileOption = None,
) -> None:
    """Mini-PNG画像をPNG形式で書き出す"""
    if output is None:
        output = input_path.with_suffix(".png")

    with _create_logger(verbose, log_file) as logger:
        try:
            image = decode(read_bytes(input_path))
            export_png(image, output)
        except MiniPNGError as e:
            logger.error(str(e))
            raise typer.Exit(ExitCode.ERROR) from e

        logger.log_image(input_path, image)
        logger.info(f"書き出し完了: {output}")


def version_callback(value: bool) -> None:
    """バージョン表示コールバック"""
    if value:
        typer.echo(f"minipng {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="バージョンを表示する",
        ),
    ] = False,
) -> None:
    """Mini-PNG CLI - 小さな画像フォーマットの表示・作成"""
    pass
