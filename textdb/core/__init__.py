"""Core storage engine components."""
from .store import TextDB, validate_key
from .logfile import LogFile
from .index import Index, Locator, EntryState
from .replay import replay, ReplayResult

__all__ = ['TextDB', 'validate_key', 'LogFile', 'Index', 'Locator', 'EntryState',
           'replay', 'ReplayResult']
