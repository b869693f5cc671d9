"""
yc_runner – configuration step of the ephemeral Yandex Cloud CI runner action.

Reads the action inputs, parses them into typed settings, and validates the
mode-dependent rules before any VM lifecycle work starts.
"""
