"""Config show command.

CLI: doclinks config show
"""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult


def cmd_show() -> StageResult:
    """Show the effective configuration (file values or defaults)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from .DocLinksConfig import DocLinksConfig

        config_path = DocLinksConfig.get_config_path()
        yield (0.3, "Loading configuration...")
        try:
            config = DocLinksConfig.load()
        except ValueError as e:
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                content={},
                config_path=str(config_path),
                config_exists=config_path.exists(),
            ).model_dump(mode="python")
            result_obj.result = f"Failed to load config: {e}"
            result_obj.success = False
            return

        warnings = [] if config_path.exists() else [f"No config file at {config_path}, using defaults"]
        yield (1.0, "Complete")
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=warnings,
            content=config.to_dict(),
            config_path=str(config_path),
            config_exists=config_path.exists(),
        ).model_dump(mode="python")
        result_obj.result = f"Configuration from {config_path}" if config_path.exists() else "Default configuration"
        result_obj.success = True

    return StageResult(
        announce="Showing configuration...",
        progress_callback=do_work,
    )
