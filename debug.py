# debug.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict

FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


class Debug:
    _root_configured: bool = False          # class-level guard

    def __init__(self) -> None:
        """
        Every Debug() instance shares one logger and one component map, so
        switching a component on from the CLI reaches every module.
        """
        if not Debug._root_configured:
            logging.basicConfig(
                level=logging.DEBUG,
                format=FORMAT,
                datefmt=DATEFMT,
                handlers=[logging.StreamHandler()],
            )
            Debug._root_configured = True

        self.logger = logging.getLogger("ENIGMA")

    def log_to(self, path: str | Path) -> logging.FileHandler:
        """Also stream every enabled component's messages to *path*."""
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(FORMAT, DATEFMT))
        self.logger.addHandler(handler)
        self.logger.setLevel(logging.DEBUG)
        return handler

    # shared state, see __init__
    enabled: bool = True
    components: Dict[str, bool] = {
        "keyfile":   False,
        "compiler":  False,
        "plugboard": False,
        "stepping":  False,
        "encipher":  False,
    }

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if Debug.enabled and Debug.components.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    def active(self, component: str) -> bool:
        """Cheap guard for call sites that build expensive messages."""
        return Debug.enabled and Debug.components.get(component, False)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug.components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug.components[c] = False

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once."""
        Debug.enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return Debug.components.copy()

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in Debug.components:
            raise ValueError(f"No such component: {component!r}")

    # nicety for `print(dbg)`
    def __repr__(self) -> str:
        active = [k for k, v in Debug.components.items() if v]
        return f"<Debug enabled={Debug.enabled} active={active}>"
