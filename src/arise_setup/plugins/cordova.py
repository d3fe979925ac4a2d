"""Cordova CLI invocation strategies."""

from arise_setup.plugins.base import InvocationStrategy

CORDOVA = InvocationStrategy(
    name="cordova",
    command=("cordova",),
)

NPX_CORDOVA = InvocationStrategy(
    name="npx cordova",
    command=("npx", "cordova"),
)
