from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

import yaml

from bigofit import __version__
from bigofit.config.loader import DEFAULT_CONFIG_NAME, load_config
from bigofit.config.schema import OUTPUT_FORMATS, BigOFitConfig
from bigofit.config.templates import CONFIG_PRESETS
from bigofit.config.validate import validate_config_paths
from bigofit.errors import BigOFitError
from bigofit.fit.catalog import model_names
from bigofit.fit.selector import best, evaluate
from bigofit.ingest.series import read_series
from bigofit.report.format_scores import to_json, to_text
from bigofit.report.models import ScoresReport, summarize
from bigofit.util.logging import setup_logging

log = logging.getLogger(__name__)


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _effective_config(args: argparse.Namespace) -> BigOFitConfig:
    root = Path(args.root).resolve()
    config_paths = [Path(p) for p in args.config] if args.config else None
    cfg = load_config(root, config_paths)
    overrides: dict[str, object] = {}
    if args.workers is not None:
        overrides["parallel_workers"] = max(0, args.workers)
    if args.min_samples is not None:
        overrides["min_samples"] = max(1, args.min_samples)
    if getattr(args, "format", None):
        overrides["output_format"] = args.format
    if overrides:
        cfg = dataclasses.replace(cfg, **overrides)
    return cfg


def _evaluate_input(args: argparse.Namespace, cfg: BigOFitConfig) -> ScoresReport | None:
    try:
        text = _read_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        log.error("Failed to read %s (%s).", args.input, e)
        return None
    series = read_series(text)
    scored = evaluate(series, workers=cfg.parallel_workers, min_samples=cfg.min_samples)
    return ScoresReport(selected=best(scored).name, summary=summarize(series), scores=scored)


def cmd_select(args: argparse.Namespace) -> int:
    cfg = _effective_config(args)
    try:
        report = _evaluate_input(args, cfg)
    except BigOFitError as e:
        log.error("%s", e)
        return 2
    if report is None:
        return 1
    print(report.selected)
    return 0


def cmd_scores(args: argparse.Namespace) -> int:
    cfg = _effective_config(args)
    try:
        report = _evaluate_input(args, cfg)
    except BigOFitError as e:
        log.error("%s", e)
        return 2
    if report is None:
        return 1
    if cfg.output_format == "json":
        print(to_json(report))
    else:
        print(to_text(report, precision=cfg.precision))
    return 0


def cmd_models(args: argparse.Namespace) -> int:
    for name in model_names():
        print(name)
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    root = Path(args.path).resolve()
    target = Path(args.output) if args.output else root / DEFAULT_CONFIG_NAME
    if not target.is_absolute():
        target = root / target
    preset = str(args.preset or "full").lower()
    template = CONFIG_PRESETS.get(preset, CONFIG_PRESETS["full"])
    if target.exists() and not args.force:
        log.error("Config %s already exists. Use --force to overwrite.", target)
        return 1
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(template, encoding="utf-8")
    log.info("Wrote config to %s", target)
    return 0


def _resolve_config_paths(root: Path, config_args: list[str] | None) -> list[Path]:
    if not config_args:
        return [root / DEFAULT_CONFIG_NAME]
    out: list[Path] = []
    for p in config_args:
        path = Path(p)
        if not path.is_absolute():
            path = root / path
        out.append(path)
    return out


def cmd_config_show(args: argparse.Namespace) -> int:
    root = Path(args.path).resolve()
    config_paths = [Path(p) for p in args.config] if args.config else None
    cfg = load_config(root, config_paths)
    print(yaml.safe_dump(dataclasses.asdict(cfg), sort_keys=False), end="")
    return 0


def cmd_config_validate(args: argparse.Namespace) -> int:
    root = Path(args.path).resolve()
    config_paths = _resolve_config_paths(root, args.config)
    if not args.config and not config_paths[0].exists():
        log.error("Config %s not found.", config_paths[0])
        return 1
    errors = validate_config_paths(config_paths)
    if errors:
        for err in errors:
            log.error("%s", err)
        return 1
    log.info("Config valid.")
    return 0


def _add_fit_args(a: argparse.ArgumentParser) -> None:
    a.add_argument("input", nargs="?", default="-", help="Sample file (default: stdin)")
    a.add_argument("--root", default=".", help="Directory holding .bigofit.yml (default: .)")
    a.add_argument(
        "--config",
        action="append",
        default=None,
        help="Config file path (repeatable, root-relative or absolute)",
    )
    a.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Thread pool size for scoring models (0=sequential)",
    )
    a.add_argument(
        "--min-samples",
        type=int,
        default=None,
        help="Reject series with fewer samples than this",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bigofit", description="bigofit: empirical Big-O growth class fitting")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")

    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("select", help="Print the best-fitting growth class")
    _add_fit_args(s)
    s.set_defaults(func=cmd_select)

    r = sub.add_parser("scores", help="Print the residual of every growth class")
    _add_fit_args(r)
    r.add_argument("--format", default=None, choices=sorted(OUTPUT_FORMATS), help="Output format")
    r.set_defaults(func=cmd_scores)

    m = sub.add_parser("models", help="List the growth classes in catalog order")
    m.set_defaults(func=cmd_models)

    c = sub.add_parser("config", help="Config utilities")
    c_sub = c.add_subparsers(dest="config_cmd", required=True)
    c_show = c_sub.add_parser("show", help="Show merged config")
    c_show.add_argument("path", nargs="?", default=".", help="Config root (default: .)")
    c_show.add_argument(
        "--config",
        action="append",
        default=None,
        help="Config file path (repeatable, root-relative or absolute)",
    )
    c_show.set_defaults(func=cmd_config_show)

    c_validate = c_sub.add_parser("validate", help="Validate config file(s)")
    c_validate.add_argument("path", nargs="?", default=".", help="Config root (default: .)")
    c_validate.add_argument(
        "--config",
        action="append",
        default=None,
        help="Config file path (repeatable, root-relative or absolute)",
    )
    c_validate.set_defaults(func=cmd_config_validate)

    i = sub.add_parser("init", help="Create a bigofit configuration file")
    i.add_argument("path", nargs="?", default=".", help="Config root (default: .)")
    i.add_argument("--output", default=None, help="Output path (default: .bigofit.yml)")
    i.add_argument(
        "--preset",
        default="full",
        choices=sorted(CONFIG_PRESETS.keys()),
        help="Template preset (default: full)",
    )
    i.add_argument("--force", action="store_true", help="Overwrite existing config if present")
    i.set_defaults(func=cmd_init)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(bool(args.verbose))
    return int(args.func(args))
