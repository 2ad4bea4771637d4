from nonebot.utils import escape_tag
from nonebot.utils import logger_wrapper as _logger_wrapper


class logger_wrapper:
    """Component logger over nonebot's.

    Arguments are formatted into `message` with tags escaped, so markup being
    parsed is never read as loguru color tags.
    """

    def __init__(self, logger_name: str) -> None:
        self._logger = _logger_wrapper(logger_name)

    def warning(self, message: str, *args: object) -> None:
        self._log("WARNING", message, args)

    def debug(self, message: str, *args: object) -> None:
        self._log("DEBUG", message, args)

    def _log(self, level: str, message: str, args: tuple[object, ...]) -> None:
        self._logger(level, message.format(*(escape_tag(str(arg))
                                              for arg in args)))
