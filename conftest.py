"""
Root pytest configuration.

Keeps the project root on sys.path so tests can import `circulation`,
`scripts` and `tests.helpers` without an install step.
"""
