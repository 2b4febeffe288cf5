import logging

from .exceptions import MalformedResponseBody
from .models import Response
from .tree import Tree

logger = logging.getLogger(__name__)

HTTP_OK = 200


def parse_tree(response: Response, url: str) -> Tree:
    """Turn a completed response into a tree.

    Any status other than 200 yields ``{"error": "Status <code> when getting
    <url>"}`` without looking at the body.

    Raises:
        MalformedResponseBody: status is 200 but the body is not a JSON
            object or array.
    """
    if response.status_code != HTTP_OK:
        logger.warning(
            "When trying url [%s], received non-OK code %s", url, response.status_code
        )
        tree = Tree()
        tree.put("error", f"Status {response.status_code} when getting {url}")
        return tree

    try:
        return Tree.from_json(response.body)
    except (ValueError, RecursionError) as exc:
        logger.error("error reading result of URL:\n\t%s", url)
        logger.error("response is:\n%s", response.text())
        raise MalformedResponseBody(url, response.body, str(exc)) from exc
