# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains the :class:`Split` class, representing a weighted
bipartition of a taxon set.
"""

__name__ = "splitnet.splits"
__author__ = "The Splitnet contributors"
__all__ = ["Split"]

import numpy as np


class Split:
    """
    A weighted bipartition of a set of taxa.

    The taxa are represented by indices from *0* to *n_taxa - 1*.
    These indices refer to a separate list or array, containing the
    actual taxon objects, e.g. species names.
    A :class:`Split` stores one side of the bipartition, the other side
    is implicitly given by its complement.

    Objects of this class are immutable.

    Parameters
    ----------
    part : iterable of int
        The taxon indices on one side of the split.
    n_taxa : int
        The total number of taxa.
    weight : float, optional
        The non-negative weight of the split.

    Attributes
    ----------
    part : frozenset of int
        The taxon indices on the given side of the split.
    complement : frozenset of int
        The taxon indices on the other side of the split.
    n_taxa : int
        The total number of taxa.
    weight : float
        The weight of the split.

    Notes
    -----
    Two splits are equal, if they describe the same bipartition with
    the same weight, regardless of which side was given as `part`.

    Examples
    --------

    >>> split = Split([0, 1], n_taxa=4, weight=2.0)
    >>> print(split)
    {0, 1} | {2, 3}  (2.0)
    >>> print(split.separates(1, 2))
    True
    >>> print(split == Split([2, 3], n_taxa=4, weight=2.0))
    True
    """

    def __init__(self, part, n_taxa, weight=1.0):
        n_taxa = int(n_taxa)
        if n_taxa < 1:
            raise ValueError("At least one taxon is required")
        part = frozenset(int(taxon) for taxon in part)
        for taxon in part:
            if taxon < 0 or taxon >= n_taxa:
                raise IndexError(
                    f"Taxon index {taxon} is out of range "
                    f"for {n_taxa} taxa"
                )
        weight = float(weight)
        if weight < 0:
            raise ValueError(f"Split weight must be non-negative, got {weight}")
        self._part = part
        self._n_taxa = n_taxa
        self._weight = weight

    @property
    def part(self):
        return self._part

    @property
    def complement(self):
        return frozenset(range(self._n_taxa)) - self._part

    @property
    def n_taxa(self):
        return self._n_taxa

    @property
    def weight(self):
        return self._weight

    def size(self):
        """
        The number of taxa on the smaller side of the split.

        Returns
        -------
        size : int
            The size of the smaller side.
        """
        return min(len(self._part), self._n_taxa - len(self._part))

    def is_trivial(self):
        """
        Check whether this split separates at most a single taxon
        from the rest.

        Returns
        -------
        trivial : bool
            True, if one side contains at most one taxon.
        """
        return self.size() <= 1

    def separates(self, taxon1, taxon2):
        """
        Check whether two taxa lie on different sides of this split.

        Parameters
        ----------
        taxon1, taxon2 : int
            The taxon indices.

        Returns
        -------
        separated : bool
            True, if exactly one of the taxa is in :attr:`part`.
        """
        return (taxon1 in self._part) != (taxon2 in self._part)

    def is_compatible(self, other):
        """
        Check whether this split is compatible with another split.

        Two splits *A|A'* and *B|B'* are compatible, if at least one of
        the intersections *A∩B*, *A∩B'*, *A'∩B* and *A'∩B'* is empty.
        A set of pairwise compatible splits can be represented by a
        tree.

        Parameters
        ----------
        other : Split
            The split to compare with.
            Must refer to the same number of taxa.

        Returns
        -------
        compatible : bool
            True, if the splits are compatible.
        """
        if other.n_taxa != self._n_taxa:
            raise ValueError(
                f"Split over {other.n_taxa} taxa cannot be compared "
                f"with a split over {self._n_taxa} taxa"
            )
        a = self._part
        a_comp = self.complement
        b = other.part
        b_comp = other.complement
        return (
            a.isdisjoint(b)
            or a.isdisjoint(b_comp)
            or a_comp.isdisjoint(b)
            or a_comp.isdisjoint(b_comp)
        )

    def is_circular(self, cycle):
        """
        Check whether one side of this split is a contiguous arc of the
        given circular ordering.

        Parameters
        ----------
        cycle : array-like, dtype=int
            A circular ordering of all taxa.

        Returns
        -------
        circular : bool
            True, if the split is compatible with the circular
            ordering.
        """
        cycle = np.asarray(cycle, dtype=int)
        if len(cycle) != self._n_taxa:
            raise ValueError(
                f"Ordering has {len(cycle)} taxa, "
                f"but the split is defined over {self._n_taxa} taxa"
            )
        in_part = np.isin(cycle, list(self._part))
        # An arc of a circle has at most two borders between
        # positions inside and outside of the arc
        borders = np.count_nonzero(in_part != np.roll(in_part, 1))
        return borders <= 2

    def as_mask(self):
        """
        Get the side :attr:`part` as boolean mask over all taxa.

        Returns
        -------
        mask : ndarray, shape=(n,), dtype=bool
            True for each taxon in :attr:`part`.
        """
        mask = np.zeros(self._n_taxa, dtype=bool)
        mask[list(self._part)] = True
        return mask

    def _canonical_part(self):
        # Normalize to the side not containing the taxon with index 0
        if 0 in self._part:
            return self.complement
        return self._part

    def __eq__(self, item):
        if not isinstance(item, Split):
            return False
        return (
            self._n_taxa == item.n_taxa
            and self._weight == item.weight
            and self._canonical_part() == item._canonical_part()
        )

    def __hash__(self):
        return hash((self._n_taxa, self._weight, self._canonical_part()))

    def __str__(self):
        part = ", ".join(str(taxon) for taxon in sorted(self._part))
        complement = ", ".join(str(taxon) for taxon in sorted(self.complement))
        return f"{{{part}}} | {{{complement}}}  ({self._weight})"

    def __repr__(self):
        return (
            f"Split({sorted(self._part)}, n_taxa={self._n_taxa}, "
            f"weight={self._weight!r})"
        )
