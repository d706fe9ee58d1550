import logging


def setup_logger(level: int = logging.INFO) -> logging.Logger:
    """
    Создаёт и настраивает логгер пакета ``lloyd_kmeans``.

    :param level: минимальный уровень логирования
    :return: настроенный экземпляр :class:`logging.Logger`
    """
    logger = logging.getLogger("lloyd_kmeans")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Чтобы сообщения не дублировались через root-логгер
    logger.propagate = False

    return logger


def format_fit_prefix(n: int, k: int, d: int | None = None) -> str:
    """Текстовый префикс для логов одного запуска: ``[N=.. D=.. K=..]``."""
    if d is None:
        return f"[N={n} K={k}]"
    return f"[N={n} D={d} K={k}]"


class PrefixedLogger:
    """Обёртка над логгером, добавляющая префикс к каждому сообщению."""

    def __init__(self, base_logger: logging.Logger | None, prefix: str) -> None:
        self._base = base_logger
        self._prefix = prefix

    def info(self, msg: str, *args, **kwargs) -> None:
        if self._base:
            self._base.info(f"{self._prefix} {msg}", *args, **kwargs)
