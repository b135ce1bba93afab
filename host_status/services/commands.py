import logging
import subprocess
from typing import List, Optional

LOGGER = logging.getLogger(__name__)


def run_command(args: List[str], timeout_seconds: float) -> Optional[str]:
    """
    Run an external tool and return its stdout, or None if it is unusable.

    Missing binaries, timeouts and non-zero exit codes are all treated the
    same way: the tool is unavailable for this request. Callers degrade the
    affected fields to absent instead of failing the request.
    """
    try:
        result = subprocess.run(
            args,
            check=False,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout_seconds,
        )
    except FileNotFoundError:
        LOGGER.debug("%s binary not found on host system", args[0])
        return None
    except subprocess.TimeoutExpired:
        LOGGER.debug("%s timed out after %.1fs", args[0], timeout_seconds)
        return None
    except OSError as exc:
        LOGGER.debug("%s could not be started: %s", args[0], exc)
        return None

    if result.returncode != 0:
        LOGGER.debug(
            "%s failed with return code %s: %s",
            args[0],
            result.returncode,
            (result.stderr or "").strip(),
        )
        return None

    return result.stdout
