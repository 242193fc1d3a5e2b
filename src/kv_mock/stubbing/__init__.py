from .registry import Expectation, ExpectationRegistry
from .sequencer import ResultSequencer, SequencerState
from .when import WhenKv

__all__ = ["Expectation", "ExpectationRegistry", "ResultSequencer", "SequencerState", "WhenKv"]
