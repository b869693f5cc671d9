"""
Action input loading and validation.

Provides the input-source abstraction, strongly typed configuration objects,
and the fail-fast validation of mode-dependent required inputs.
"""
