""" The set of request kinds (packet types) known to XDN, and the registry
    that maps an integer packet code back to its kind. The registry is
    built exactly once, when this module is imported; a conflict between
    two kinds claiming the same code is a programming error, and raising
    :class:`RegistryConflict` at import time keeps such a build from
    serving any requests.
"""

import collections
import logging
import threading

logger = logging.getLogger(__name__)


PacketType = collections.namedtuple('PacketType', ('code', 'kind'))
PacketType.__doc__ = """ An immutable pairing of an integer packet *code*
    with the *kind* label it represents.
"""

SERVICE_HTTP_REQUEST = PacketType(31300, 'XDN_SERVICE_HTTP_REQUEST')
FORWARD_HTTP_REQUEST = PacketType(31301, 'XDN_FORWARD_HTTP_REQUEST')
STATEDIFF_APPLY_REQUEST = PacketType(31302, 'XDN_STATEDIFF_APPLY_REQUEST')

defined = (SERVICE_HTTP_REQUEST, FORWARD_HTTP_REQUEST, STATEDIFF_APPLY_REQUEST)



class RegistryConflict(RuntimeError):
    """ Raised when a packet code is claimed by more than one kind.
    """

    def __init__(self, code, existing, conflicting):
        self.code = code
        self.existing = existing
        self.conflicting = conflicting

        text = 'packet code %d already registered to %s, cannot register %s'
        text = text % (code, existing, conflicting)
        RuntimeError.__init__(self, text)


# end of class RegistryConflict



class Registry:
    """ A mapping from packet code to :class:`PacketType`. Registration is
        only permitted until :func:`freeze` is called; after that point the
        registry is read-only, and lookups are safe from any thread without
        further locking.
    """

    def __init__(self):

        self._by_code = dict()
        self._frozen = False
        self._lock = threading.Lock()


    def __contains__(self, code):
        return self.get(code) is not None


    def __iter__(self):
        return iter(self._by_code.values())


    def __len__(self):
        return len(self._by_code)


    def freeze(self):
        self._frozen = True


    def get(self, code):
        """ Return the :class:`PacketType` for *code*, or None if no such
            code is registered. The *code* may be an integer or a string of
            ASCII decimal digits; anything else is never a registered code.
        """

        if isinstance(code, bool):
            return None

        if isinstance(code, str):
            if code.isascii() and code.isdecimal():
                code = int(code)
            else:
                return None
        elif not isinstance(code, int):
            return None

        return self._by_code.get(code)


    def lookup(self, code):
        """ Return the :class:`PacketType` for *code*, raising KeyError if
            there is no such code.
        """

        found = self.get(code)

        if found is None:
            raise KeyError('unknown packet code: ' + repr(code))

        return found


    def register(self, code, kind):
        """ Register the *kind* label under the integer *code*, returning the
            resulting :class:`PacketType`. Registering the same pairing twice
            is harmless; registering a different kind under a code that is
            already taken raises :class:`RegistryConflict`.
        """

        if isinstance(code, bool) or not isinstance(code, int):
            raise TypeError('packet codes must be integers, not ' + repr(code))

        packet_type = PacketType(code, kind)

        with self._lock:
            if self._frozen:
                raise RuntimeError('packet type registry is frozen, cannot register ' + repr(packet_type))

            try:
                existing = self._by_code[code]
            except KeyError:
                self._by_code[code] = packet_type
            else:
                if existing != packet_type:
                    raise RegistryConflict(code, existing.kind, kind)

        return packet_type


# end of class Registry



def initialize(types=defined):
    """ Build, populate, and freeze a new :class:`Registry` containing every
        :class:`PacketType` in *types*. Any conflict raises
        :class:`RegistryConflict`; no partially built registry is returned.
    """

    new_registry = Registry()

    for packet_type in types:
        new_registry.register(packet_type.code, packet_type.kind)

    new_registry.freeze()
    logger.debug("registered %d packet types", len(new_registry))
    return new_registry


registry = initialize()
get = registry.get
lookup = registry.lookup


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
