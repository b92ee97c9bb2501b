# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import itertools
from os.path import dirname, join, realpath
import numpy as np


def data_dir(subdir):
    return join(dirname(realpath(__file__)), subdir, "data")


### Functions for constructing test problems ###


def random_weights(n, rng, zero_fraction=0.0):
    """
    Create a symmetric matrix of random non-negative circular split
    weights with zero diagonal.
    """
    upper = np.triu(rng.random((n, n)), k=1)
    if zero_fraction > 0:
        upper[rng.random((n, n)) < zero_fraction] = 0
        upper = np.triu(upper, k=1)
    return upper + upper.T


def random_symmetric(n, rng):
    """
    Create a random symmetric matrix with zero diagonal, whose entries
    may be negative.
    """
    upper = np.triu(rng.normal(size=(n, n)), k=1)
    return upper + upper.T


def upper_dot(a, b):
    """
    Inner product of two symmetric matrices over their upper triangle.
    """
    upper = np.triu_indices(a.shape[0], k=1)
    return np.sum(a[upper] * b[upper])


def design_matrix(n):
    """
    Set up the design matrix explicitly:
    Each row belongs to a pair of positions (a,b), each column to a
    split (i,j), whose arc contains the positions i, ..., j-1.
    """
    pairs = list(itertools.combinations(range(n), 2))
    matrix = np.zeros((len(pairs), len(pairs)))
    for col, (i, j) in enumerate(pairs):
        for row, (a, b) in enumerate(pairs):
            if (i <= a < j) != (i <= b < j):
                matrix[row, col] = 1
    return matrix


def to_vector(matrix):
    return matrix[np.triu_indices(matrix.shape[0], k=1)]


def to_matrix(vector, n):
    matrix = np.zeros((n, n))
    upper = np.triu_indices(n, k=1)
    matrix[upper] = vector
    return matrix + matrix.T
