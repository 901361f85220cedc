"""
Identity Registry Module

This module implements the IdentityRegistry class, the single source of
gene identities (a.k.a. innovation numbers) for one evolutionary run.

Classes:
    IdentityRegistry: Issues unique, strictly increasing identities and caches
                      the identities assigned to structural innovations
"""

import threading
from typing import Container, Iterable

class IdentityRegistry:
    """
    Issues identities for node and connection genes.

    Identities are unique for the lifetime of the registry and strictly increasing;
    node genes and connection genes draw from the same counter. One registry is
    created per evolutionary run and shared by reference among all its genomes.
    Independent registries do not interfere, so several runs may coexist in one
    process.

    With 'reuse_innovations' enabled, the registry also remembers which identities
    it handed out for a structural change (a connection between two given nodes,
    the split of a given connection), so that the same change performed by two
    different genomes gets the same identities and the resulting genes align
    during crossover. Recurrent and feed-forward connections between the same
    two nodes are different changes.

    All public methods are serialized by a lock, so a registry may be shared by
    genomes mutated on different threads.

    Public Methods:
        next():                                      Return a fresh identity
        reserve(identity):                           Never hand out identities up to 'identity'
        register_connections(connections):           Record imported connections
        connection_id(node_in, node_out, recurrent): Identity for a connection between two nodes
        split_ids(innovation, taken):                Identities for splitting a connection
    """

    def __init__(self, reuse_innovations: bool = True, start: int = 0):
        """
        Parameters:
            reuse_innovations: Whether identical structural changes share identities
            start:             First identity to hand out
        """
        self.reuse_innovations = reuse_innovations

        self._last = start - 1
        self._lock = threading.Lock()

        # For each connection ever created, map (node_in, node_out, recurrent) to its identity
        self._connection_ids: dict[tuple[int, int, bool], int] = {}

        # For each connection ever split, the (node, conn_in, conn_out) identities
        # created by its successive splits
        self._split_ids: dict[int, list[tuple[int, int, int]]] = {}

    @property
    def last(self) -> int:
        """The most recently issued identity (start - 1 if none was issued)."""
        return self._last

    def next(self) -> int:
        """
        Return a fresh identity, greater than every identity issued before.
        """
        with self._lock:
            return self._next()

    def connection_id(self, node_in: int, node_out: int, recurrent: bool = False) -> int:
        """
        Get the identity for a connection, identified by its endpoints.
        Returns the existing identity if this connection was created before
        (and innovations are reused), otherwise a fresh one.

        Parameters:
            node_in:   node ID for the 'from' end of the connection
            node_out:  node ID for the 'to'   end of the connection
            recurrent: whether the connection is a recurrent one

        Returns:
            connection ID (a.k.a. innovation number)
        """
        with self._lock:
            return self._connection_id(node_in, node_out, recurrent)

    def split_ids(self, innovation: int, node_in: int, node_out: int,
                  taken: Container[int] = ()) -> tuple[int, int, int]:
        """
        Get the node ID and connection IDs for splitting a connection.

        If this connection has been split before, the identities of an earlier
        split are returned, skipping those whose node ID is in 'taken' (the
        genome asking already holds that node, i.e. it splits the same connection
        a second time). Otherwise new identities are created and remembered.

        Parameters:
            innovation: identity of the connection being split
            node_in:    'from' end of the connection being split
            node_out:   'to'   end of the connection being split
            taken:      node IDs that must not be returned

        Returns:
            3-tuple: (new_node_id, innovation1, innovation2)
            innovation1 is for the connection node_in -> new node
            innovation2 is for the connection new node -> node_out
        """
        with self._lock:
            if not self.reuse_innovations:
                new_node_id = self._next()
                return new_node_id, self._next(), self._next()

            earlier_splits = self._split_ids.setdefault(innovation, [])
            for split in earlier_splits:
                if split[0] not in taken:
                    return split

            new_node_id = self._next()
            innov1      = self._connection_id(node_in, new_node_id)
            innov2      = self._connection_id(new_node_id, node_out)
            earlier_splits.append((new_node_id, innov1, innov2))
            return new_node_id, innov1, innov2

    def reserve(self, identity: int) -> None:
        """
        Make sure that 'identity' and every smaller value are never issued.
        Used when genes created elsewhere (e.g. deserialized) join the run.
        """
        with self._lock:
            self._last = max(self._last, identity)

    def register_connections(self, connections: Iterable[tuple[int, int, int, bool]]) -> None:
        """
        Record connections created elsewhere (e.g. deserialized) that join the run.

        Every identity is reserved. An identity is only remembered for reuse if it
        lies above every identity this registry had issued before the call; a
        smaller one may already belong to a node or another connection of the run.
        An earlier record for the same endpoints is kept.

        Parameters:
            connections: (node_in, node_out, innovation, recurrent) tuples
        """
        with self._lock:
            issued = self._last
            for node_in, node_out, innovation, recurrent in connections:
                self._last = max(self._last, innovation)
                if self.reuse_innovations and innovation > issued:
                    self._connection_ids.setdefault((node_in, node_out, recurrent), innovation)

    def _next(self) -> int:
        self._last += 1
        return self._last

    def _connection_id(self, node_in: int, node_out: int, recurrent: bool = False) -> int:
        if not self.reuse_innovations:
            return self._next()

        key = (node_in, node_out, recurrent)
        if key not in self._connection_ids:
            self._connection_ids[key] = self._next()
        return self._connection_ids[key]

    def __repr__(self):
        return f"IdentityRegistry(last={self._last}, reuse_innovations={self.reuse_innovations})"
