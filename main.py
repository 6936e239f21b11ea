"""Punto de entrada de la calculadora."""

from __future__ import annotations

import logging
import os

from calculator_engine import CalculatorEngine


WINDOW_GEOMETRY = "360x600"
WINDOW_MIN_SIZE = (320, 540)
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level() -> int:
    """Nivel de log, sobrescribible con CALCULADORA_LOG_LEVEL."""
    name = os.environ.get("CALCULADORA_LOG_LEVEL", LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Nivel de log desconocido: {name}")
    return level


def configure_logging(level: int | None = None) -> logging.Logger:
    logger = logging.getLogger()
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(resolve_log_level() if level is None else level)
    return logger


def main():
    import tkinter as tk

    from calculator_ui import CalculatorApp

    configure_logging()
    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    root.minsize(*WINDOW_MIN_SIZE)
    CalculatorApp(root, engine=CalculatorEngine())
    root.mainloop()


if __name__ == "__main__":
    main()
