import logging
from typing import Iterable, Optional, Union

ROOT_LOGGER = "dungen"

# Topics that can be switched to DEBUG on their own (last module name segment).
PROJECT_TOPICS = {"generator", "maze", "sparseness", "deadends", "cli", "app"}


class TopicLogFormatter(logging.Formatter):
    """Aligned ``LEVEL:topic: message`` console output, optionally coloured."""

    COLORS = {
        logging.DEBUG: "\033[38;5;252m",
        logging.INFO: "\033[38;5;111m",
        logging.WARNING: "\033[38;5;229m",
        logging.ERROR: "\033[38;5;210m",
        logging.CRITICAL: "\033[38;5;217m",
    }
    BOLD = "\033[1m"
    RESET = "\033[0m"

    def __init__(self, use_color: bool = False) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        level_name = record.levelname[:5]
        topic = record.name.split(".")[-1][:10]
        if self.use_color:
            color = self.COLORS.get(record.levelno, self.RESET)
            prefix = f"{color}{level_name:<5}{self.RESET}:{self.BOLD}{topic:<10}{self.RESET}: "
        else:
            prefix = f"{level_name:<5}:{topic:<10}: "
        s = super().format(record)
        return "\n".join(f"{prefix}{line}" for line in s.split("\n"))


def setup_logging(
    level: Union[int, str] = logging.INFO,
    color_logs: bool = False,
    debug_topics: Optional[Iterable[str]] = None,
) -> logging.Logger:
    """Configure the ``dungen`` logger hierarchy for console output."""
    root_logger = logging.getLogger(ROOT_LOGGER)
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)
        h.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(TopicLogFormatter(use_color=color_logs))
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level.upper() if isinstance(level, str) else level)
    root_logger.propagate = False

    if debug_topics:
        user_topics = {t.strip() for t in debug_topics if t.strip()}
        topics = (
            PROJECT_TOPICS
            if "all" in user_topics
            else {full for u in user_topics for full in PROJECT_TOPICS if full.startswith(u)}
        )
        for topic in topics:
            for name in list(logging.root.manager.loggerDict):
                if name.startswith(ROOT_LOGGER) and name.split(".")[-1] == topic:
                    logging.getLogger(name).setLevel(logging.DEBUG)
    return root_logger
