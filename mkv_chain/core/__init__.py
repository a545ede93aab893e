# mkv_chain/core/__init__.py
# Chain layer and its event log.

from mkv_chain.core.logging_layer import Event, EventFilter, EventLogger, LoggingError
from mkv_chain.core.markov_chain import ChainError, MarkovChain
