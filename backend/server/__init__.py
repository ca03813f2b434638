"""HTTP adapter hosting one checkers game."""

from __future__ import annotations

from importlib import import_module

__all__ = ["app", "create_app", "GameSession"]

_LAZY = {
	"app": ".app",
	"create_app": ".app",
	"GameSession": ".session",
}


def __getattr__(name: str):
	target = _LAZY.get(name)
	if target is None:
		raise AttributeError(name)
	return getattr(import_module(target, __name__), name)
