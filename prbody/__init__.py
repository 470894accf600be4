"""Update a pull request description from a workflow step."""

__version__ = "0.1.0"
