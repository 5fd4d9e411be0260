"""
Package marker for source code under `src`.
It groups the gcd kernel, the web service, and shared helpers under one import path.
Most functionality lives in the subpackages; this file intentionally stays lightweight.
"""
