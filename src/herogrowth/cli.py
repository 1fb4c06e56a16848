import argparse
from pathlib import Path

import pandas as pd
from rich.console import Console
from rich.markup import escape

from herogrowth.config import settings, setup_logging
from herogrowth.datasource import get_datasource
from herogrowth.models.growtherror import GrowthError
from herogrowth.pipeline.pipeline import GrowthPipeline
from herogrowth.render.terminal import TerminalRenderer
from herogrowth.render.web import REPORT_FILENAME, WebRenderer
from herogrowth.runner import ReportRunner

logger = setup_logging(__name__)
err_console = Console(stderr=True, highlight=False)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="herogrowth", description="Hero upgrade growth reports")
    parser.add_argument("--data-dir", dest="data_dir", type=Path, help="Directory holding hero stats files")
    subparsers = parser.add_subparsers(dest="command", required=True)

    terminal_parser = subparsers.add_parser("terminal", help="Print growth graphs to the terminal")
    terminal_parser.add_argument("--hero", help="Only report this hero")

    web_parser = subparsers.add_parser("web", help="Write the interactive HTML report")
    web_parser.add_argument(
        "--output",
        type=Path,
        default=settings.ASSET_OUTPUT_DIR / REPORT_FILENAME,
        help="HTML output path",
    )

    export_parser = subparsers.add_parser("export", help="Write the comparison table as CSV")
    export_parser.add_argument(
        "--output",
        type=Path,
        default=settings.ASSET_OUTPUT_DIR / "hero_comparison.csv",
        help="CSV output path",
    )

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.API_HOST)
    serve_parser.add_argument("--port", type=int, default=settings.API_PORT)
    return parser


def _build_runner(args: argparse.Namespace) -> ReportRunner:
    return ReportRunner(
        datasource=get_datasource(args.data_dir),
        pipeline=GrowthPipeline(tracked_stats=settings.TRACKED_STATS, top_n=settings.TOP_N),
    )


def _run_terminal(args: argparse.Namespace, runner: ReportRunner) -> Path | None:
    result = runner.run(hero=args.hero)
    TerminalRenderer(tracked_stats=runner.pipeline.tracked_stats).render(result.results, result.comparison)
    if not settings.SAVE_HTML:
        return None

    web = WebRenderer(tracked_stats=runner.pipeline.tracked_stats, output_dir=settings.ASSET_OUTPUT_DIR)
    path = web.save(web.render(result.results, result.comparison))
    print(f"Web report written to {path}")
    return path


def _run_web(args: argparse.Namespace, runner: ReportRunner) -> Path:
    renderer = WebRenderer(tracked_stats=runner.pipeline.tracked_stats)
    path = renderer.save(runner.render(renderer), args.output)
    print(f"Web report written to {path}")
    return path


def _run_export(args: argparse.Namespace, runner: ReportRunner) -> Path:
    comparison = runner.run().comparison
    df = pd.DataFrame(comparison.to_records(), columns=["name", *comparison.columns])
    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False, float_format="%.4f")
    print(f"Comparison of {len(df)} heroes written to {args.output}")
    return args.output


def _run_serve(args: argparse.Namespace) -> None:
    import uvicorn

    uvicorn.run("herogrowth.api:app", host=args.host, port=args.port)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "serve":
            if args.data_dir is not None:
                settings.DATA_DIR = args.data_dir
            _run_serve(args)
            return 0

        runner = _build_runner(args)
        if args.command == "terminal":
            _run_terminal(args, runner)
        elif args.command == "web":
            _run_web(args, runner)
        elif args.command == "export":
            _run_export(args, runner)
        else:
            parser.print_help()
        return 0
    except GrowthError as exc:
        err_console.print(f"[red bold]Error:[/red bold] {escape(exc.message)}")
        return 1
    except Exception as exc:  # pragma: no cover - entry guard
        logger.error(f"CLI failed: {exc}")
        raise


if __name__ == "__main__":
    raise SystemExit(main())
