"""Reshape AlsoAsked responses into depth-annotated question trees."""

import json
from collections.abc import Sequence
from typing import Any

from .models import Account, FormattedQuestionNode, QuestionNode, SearchQueryResult, SearchResponse


def count_total_questions(nodes: Sequence[QuestionNode] | None) -> int:
    """Count every question in the given trees, nested follow-ups included."""
    if not nodes:
        return 0
    return sum(1 + count_total_questions(node.children) for node in nodes)


def format_question_hierarchy(nodes: Sequence[QuestionNode] | None, level: int = 1) -> list[FormattedQuestionNode]:
    """Convert question trees to display nodes, preserving API order at every level.

    Args:
        nodes: Questions at the current level. ``None`` is treated as empty.
        level: Depth of ``nodes``; roots are level 1.

    Returns:
        One FormattedQuestionNode per input node.
    """
    return [
        FormattedQuestionNode(
            level=level,
            question=node.question,
            child_questions=format_question_hierarchy(node.children, level + 1),
            child_count=len(node.children),
        )
        for node in nodes or []
    ]


def format_query_results(response: SearchResponse) -> list[SearchQueryResult]:
    return [
        SearchQueryResult(
            search_term=query.term,
            total_questions=count_total_questions(query.results),
            questions=format_question_hierarchy(query.results),
        )
        for query in response.queries
    ]


def format_search_response(response: SearchResponse) -> dict[str, Any]:
    """Build the tool output for a search: per-term trees plus an aggregate summary."""
    results = format_query_results(response)

    output: dict[str, Any] = {"status": response.status}
    if response.id is not None:
        output["searchId"] = response.id
    output["results"] = [result.model_dump(by_alias=True) for result in results]
    output["summary"] = {
        "totalSearchTerms": len(response.queries),
        "totalQuestions": sum(result.total_questions for result in results),
    }
    return output


def format_account(account: Account) -> dict[str, Any]:
    """Build the tool output for account info with a one-line human summary."""
    return {
        "accountInfo": account.model_dump(),
        "summary": f"Account: {account.name} ({account.email}) - {account.credits} credits remaining on {account.plan} plan",
    }


def render_json(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2)
