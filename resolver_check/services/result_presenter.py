"""Result presenter for rendering query results as JSON or YAML."""

import json
from typing import List

import yaml

from resolver_check.models.query_result import QueryResult


class PresenterError(Exception):
    """Raised when results cannot be rendered."""


class ResultPresenter:
    """Renders annotated query results for stdout.

    Key order and the presence or absence of ``testResult`` follow
    ``QueryResult.to_json``; list order follows submission order.
    """

    @staticmethod
    def generate_json(results: List[QueryResult]) -> str:
        """Generate a JSON array of results.

        Args:
            results: Query results in submission order.

        Returns:
            str: Two-space indented JSON with a trailing newline.

        Example:
            >>> print(ResultPresenter.generate_json(results), end="")
            [
              {
                "domain": "example.com",
                "status": "ALLOWED",
                "detail": "93.184.216.34"
              }
            ]
        """
        return json.dumps([r.to_json() for r in results], indent=2) + "\n"

    @staticmethod
    def generate_yaml(results: List[QueryResult]) -> str:
        """Generate a YAML list of results.

        Args:
            results: Query results in submission order.

        Returns:
            str: Block-style YAML list with insertion key order.
        """
        return yaml.safe_dump(
            [r.to_json() for r in results],
            default_flow_style=False,
            sort_keys=False,
        )

    @classmethod
    def render(cls, results: List[QueryResult], output_format: str = "json") -> str:
        """Render results in the requested format.

        Args:
            results: Query results in submission order.
            output_format: "json" or "yaml".

        Returns:
            str: Rendered document.

        Raises:
            PresenterError: If the format is unknown or serialization fails.
        """
        renderers = {"json": cls.generate_json, "yaml": cls.generate_yaml}
        renderer = renderers.get(output_format)
        if renderer is None:
            raise PresenterError(f"Unsupported output format: {output_format}")

        try:
            return renderer(results)
        except (TypeError, ValueError, AttributeError, yaml.YAMLError) as e:
            raise PresenterError(f"failed to encode results: {e}") from e
