import itertools
import unittest
from unittest import TestCase

import pytest
import numpy as np
import jax
import jax.numpy as jnp



class JaxTestCase(TestCase):
    def assertPytreeEqual(self, a, b):
        a_shapes = jax.tree.map(lambda a: jnp.asarray(a).shape, a)
        b_shapes = jax.tree.map(lambda b: jnp.asarray(b).shape, b)
        self.assertEqual(a_shapes, b_shapes, f"Shapes of pytrees `{a_shapes}` and `{b_shapes}` are not equal")
        a_leaves = jax.tree.leaves(a)
        b_leaves = jax.tree.leaves(b)
        all_equal = all([jnp.all(_a == _b) for _a, _b in zip(a_leaves, b_leaves)])
        self.assertTrue(all_equal, "Arrays are not equal")

    def assertIntegerTensor(self, a, rank, D):
        a = jnp.asarray(a)
        self.assertEqual(a.ndim, rank, f"Expected rank {rank}, got {a.ndim}")
        self.assertEqual(a.shape, (D,) * rank)
        self.assertTrue(jnp.issubdtype(a.dtype, jnp.integer), f"Expected an integer dtype, got {a.dtype}")

    def assertSymmetricUnder(self, a, axes):
        """`a` is unchanged when its axes are permuted by `axes`."""
        self.assertPytreeEqual(jnp.transpose(a, axes), a)
