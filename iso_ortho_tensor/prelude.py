import jax
import jax.numpy as jnp

__all__ = ("jax", "jnp")
