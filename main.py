"""
Fluid Space Forge Main Entry Point
==================================
Headless runner: loads the stored configuration, applies command-line
overrides, prints the generated CSS and optionally saves the result.

    python main.py --kind vars --unit rem
    python main.py --min-base 10 --max-scale 1.333 --save
    python main.py --selected md --preview 768
"""
import argparse
import logging
import sys

from core.logging_config import LoggingConfig
from version import APP_NAME, VERSION

logger = logging.getLogger(__name__)

PARAMETER_OPTIONS = {
    "min_base": "min_base_value",
    "max_base": "max_base_value",
    "min_viewport": "min_viewport",
    "max_viewport": "max_viewport",
    "min_scale": "min_scale_ratio",
    "max_scale": "max_scale_ratio",
    "unit": "unit",
}


def scale_ratio(value: str) -> float:
    """argparse type: a number or a preset name such as 'minor-third'."""
    from config.spacing import ScaleRatio

    try:
        return float(value)
    except ValueError:
        pass
    try:
        return ScaleRatio.get(value)
    except KeyError:
        names = ", ".join(name.lower().replace(" ", "-") for name in ScaleRatio.LABELS.values())
        raise argparse.ArgumentTypeError(
            f"invalid scale ratio {value!r} (use a number or one of: {names})"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description="Generate fluid spacing CSS.")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {VERSION}")
    parser.add_argument("--kind", choices=["class", "vars", "utils"],
                        help="output kind (default: the stored active tab)")
    parser.add_argument("--unit", choices=["px", "rem"])
    parser.add_argument("--min-base", type=float)
    parser.add_argument("--max-base", type=float)
    parser.add_argument("--min-viewport", type=int)
    parser.add_argument("--max-viewport", type=int)
    parser.add_argument("--min-scale", type=scale_ratio, help="ratio or preset name")
    parser.add_argument("--max-scale", type=scale_ratio, help="ratio or preset name")
    parser.add_argument("--selected", help="print only this entry (name or id)")
    parser.add_argument("--preview", type=int, metavar="VIEWPORT",
                        help="print each entry's resolved size at this viewport width")
    parser.add_argument("--db", help="database URL (overrides DATABASE_URL)")
    parser.add_argument("--save", action="store_true", help="store the resulting configuration")
    parser.add_argument("--log-level", default=None)
    return parser


def _resolve_entry_id(table, selector: str):
    for entry in table:
        if entry.name == selector or str(entry.id) == selector:
            return entry.id
    return None


def print_preview(controller, viewport: int) -> None:
    from config.spacing import ScaleEngine, ScaleRatio

    p = controller.params
    print(f"/* {ScaleEngine.device_type(viewport)} @ {viewport}px */")
    print(f"/* scale: {ScaleRatio.label(p.min_scale_ratio)} -> {ScaleRatio.label(p.max_scale_ratio)} */")
    for row in controller.compute_bounds():
        value = ScaleEngine.interpolate_at_viewport(
            row.min_px, row.max_px, p.min_viewport, p.max_viewport, viewport
        )
        marker = " (anchor)" if row.is_anchor else ""
        print(f"/* {row.name}: {value}px{marker} */")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # 1) Logging + configuration
    LoggingConfig.setup_logging(log_level=args.log_level)
    LoggingConfig.cleanup_old_logs(days_to_keep=30)

    from core.config import validate_config
    from exceptions import ConfigurationError, PersistenceError

    try:
        validate_config()
    except ConfigurationError:
        return 1

    # 2) Settings store
    from core.controller import GenerationController
    from database.models import get_session_local, reset_engine, get_engine
    from services.persistence_service import SpacePersistenceStore

    if args.db:
        reset_engine()
        get_engine(args.db)

    try:
        store = SpacePersistenceStore(get_session_local)
        params, tables, active_kind = store.load()
    except PersistenceError as e:
        logger.error(f"Could not open settings store: {e}")
        return 1

    controller = GenerationController(params, tables, args.kind or active_kind)

    # 3) Overrides
    overrides = {
        field: getattr(args, option)
        for option, field in PARAMETER_OPTIONS.items()
        if getattr(args, option) is not None
    }
    if overrides:
        result = controller.change_parameters(**overrides)
        for notice in result.notices:
            print(f"/* {notice.message} */", file=sys.stderr)

    # 4) Output
    if args.selected:
        entry_id = _resolve_entry_id(controller.active_table, args.selected)
        result = controller.select_entry(entry_id) if entry_id is not None else None
        if not result:
            logger.error(f"No entry named {args.selected!r}")
            return 2
        print(result.value)
    else:
        print(controller.regenerate())

    if args.preview is not None:
        print_preview(controller, args.preview)

    # 5) Save
    if args.save:
        result = store.save(controller.params, controller.tables, controller.active_kind)
        if not result:
            logger.error(result.message)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
