import subprocess
from pathlib import Path

from custom_logging import Logger

from .errors import HookError, ZoneWriteError


def zoneFileName(zoneName: str) -> str:
    return f"db.{zoneName}"


def writeZoneFile(outDirectory: str | Path, zoneName: str, content: str) -> Path:
    path = Path(outDirectory) / zoneFileName(zoneName)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ZoneWriteError(f"Unable to write zone file {path}: {e}") from e
    Logger.getPTRGeneratorLogger().debug(f"Wrote {path}")
    return path


def runReloadCommand(command: str) -> str:
    logger = Logger.getPTRGeneratorLogger()
    logger.info(f"Running DNS server reload command `{command}`")
    try:
        result = subprocess.run(
            command, shell=True, check=True, capture_output=True, text=True
        )
    except subprocess.CalledProcessError as e:
        raise HookError(
            f"DNS server reload command exited with {e.returncode}: {(e.stderr or e.stdout or '').strip()}",
            returncode=e.returncode,
            output=e.stderr or e.stdout,
        ) from e
    except OSError as e:
        raise HookError(f"Unable to run DNS server reload command: {e}") from e
    return result.stdout
