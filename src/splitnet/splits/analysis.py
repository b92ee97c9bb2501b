# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module provides functions for analyzing weighted split systems,
for example how well they fit a distance matrix.
"""

__name__ = "splitnet.splits"
__author__ = "The Splitnet contributors"
__all__ = ["induced_distances", "is_compatible", "least_squares_fit"]

import itertools
import numpy as np


def induced_distances(splits, n_taxa):
    """
    Compute the split metric induced by weighted splits.

    The distance between two taxa is the sum of weights of all splits
    separating them.

    Parameters
    ----------
    splits : iterable of Split
        The weighted splits.
    n_taxa : int
        The total number of taxa.

    Returns
    -------
    distances : ndarray, shape=(n,n), dtype=float
        The symmetric induced distance matrix.

    Examples
    --------

    >>> splits = [Split([0], 3, 1.0), Split([0, 1], 3, 2.0)]
    >>> print(induced_distances(splits, 3))
    [[0. 1. 3.]
     [1. 0. 2.]
     [3. 2. 0.]]
    """
    distances = np.zeros((n_taxa, n_taxa), dtype=float)
    for split in splits:
        if split.n_taxa != n_taxa:
            raise ValueError(
                f"Split over {split.n_taxa} taxa does not match "
                f"the expected {n_taxa} taxa"
            )
        mask = split.as_mask()
        # Pairs of taxa on different sides of the split
        distances[np.ix_(mask, ~mask)] += split.weight
        distances[np.ix_(~mask, mask)] += split.weight
    return distances


def is_compatible(splits):
    """
    Check whether all splits are pairwise compatible.

    A compatible split system can be displayed as a tree, otherwise
    a network is required.

    Parameters
    ----------
    splits : iterable of Split
        The splits to check.

    Returns
    -------
    compatible : bool
        True, if each pair of splits is compatible.
    """
    splits = list(splits)
    for split1, split2 in itertools.combinations(splits, 2):
        if not split1.is_compatible(split2):
            return False
    return True


def least_squares_fit(distances, splits):
    """
    Compute the least squares fit of weighted splits to a distance
    matrix in percent.

    The fit is ``100 * (1 - sum((d - p)**2) / sum(d**2))``, where
    *d* are the input distances and *p* are the distances induced by
    the splits, summed over each pair of taxa.

    Parameters
    ----------
    distances : ndarray, shape=(n,n), dtype=float
        The distance matrix.
    splits : iterable of Split
        The weighted splits over the same *n* taxa.

    Returns
    -------
    fit : float
        The fit in percent.
        *100* means that the splits reproduce the distances exactly.
        If all distances are zero, *100* is returned for a perfect
        reproduction and *0* otherwise.
    """
    distances = np.asarray(distances, dtype=float)
    if distances.ndim != 2 or distances.shape[0] != distances.shape[1]:
        raise ValueError(
            f"Distance matrix must be square, got shape {distances.shape}"
        )
    n_taxa = distances.shape[0]
    induced = induced_distances(splits, n_taxa)
    upper = np.triu_indices(n_taxa, k=1)
    sum_dist_squared = np.sum(distances[upper] ** 2)
    sum_diff_squared = np.sum((distances[upper] - induced[upper]) ** 2)
    if sum_dist_squared == 0:
        return 100.0 if sum_diff_squared == 0 else 0.0
    return float(100.0 * (1.0 - sum_diff_squared / sum_dist_squared))
