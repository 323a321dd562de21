from pathlib import Path

from custom_logging import Logger

from .errors import RenderError

DEFAULT_TEMPLATE_NAME = "zone-template.tpl"


class TemplateResolver(object):
    """Looks up `<zone>.tpl`, falling back to the shared default template."""

    template_directory: Path

    def __init__(self, template_directory: str | Path):
        self.template_directory = Path(template_directory)

    def resolve(self, zoneName: str) -> str:
        logger = Logger.getPTRGeneratorLogger()
        for candidate in (f"{zoneName}.tpl", DEFAULT_TEMPLATE_NAME):
            path = self.template_directory / candidate
            try:
                template = path.read_text(encoding="utf-8")
            except FileNotFoundError:
                continue
            except OSError as e:
                raise RenderError(f"Unable to read template {path}: {e}") from e
            if template:
                logger.debug(f"Using template {path} for zone {zoneName}")
                return template
        raise RenderError(
            f"No template for zone {zoneName}: neither {zoneName}.tpl nor {DEFAULT_TEMPLATE_NAME} found in {self.template_directory}"
        )
