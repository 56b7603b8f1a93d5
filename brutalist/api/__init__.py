"""Public API: the Brutalist facade and the parameter-entry controls."""

from brutalist.api.controls import GenerationControls, check_control
from brutalist.api.facade import Brutalist

__all__ = ["Brutalist", "GenerationControls", "check_control"]
