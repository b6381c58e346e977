from kn_core.abbr import Abbr
from kn_core.congruence import Congruence, CongruenceKind
from kn_core.errors import (CancelledError, EmptyAbbreviationError, InternalError, InvalidAbbreviationError, InvalidArgValueError,
                            KnError, NoPathFoundError, NonUnicodeInputError, WildcardAtLastPlaceError, dev_err)
from kn_core.fs import DefaultFileSystem, FileSystem, MockFileSystem
from kn_core.interactive import InteractiveSearch, UIState
from kn_core.query import build_sequences, query
from kn_core.ranking import Finding
from kn_core.search import SearchEngine
from kn_core.sequence import SearchOpts, Sequence
