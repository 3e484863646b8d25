"""Decoding of GitHub GraphQL payloads into typed result models."""

from __future__ import annotations

from typing import Any

from populate_boards.contracts.exceptions import ProviderError
from populate_boards.contracts.project import (
    ClassificationField,
    FieldLookupResult,
    FieldOption,
    ItemsPageResult,
    ProjectLookupResult,
    RemoteItem,
    RemoteProject,
)


def require_dict(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if not isinstance(value, dict):
        raise ProviderError(f"Missing/invalid object at key '{key}'")
    return value


def require_list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if not isinstance(value, list):
        raise ProviderError(f"Missing/invalid list at key '{key}'")
    return value


def require_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ProviderError(f"Missing/invalid string at key '{key}'")
    return value


def decode_project(data: dict[str, Any], owner_fragment: str) -> ProjectLookupResult:
    """Decode a project lookup; a null owner or project means "not found"."""
    owner = data.get(owner_fragment)
    if not isinstance(owner, dict):
        return ProjectLookupResult()
    project = owner.get("projectV2")
    if not isinstance(project, dict):
        return ProjectLookupResult()
    return ProjectLookupResult(project=RemoteProject(id=require_str(project, "id")))


def decode_field_node(node: dict[str, Any]) -> ClassificationField:
    options: list[FieldOption] = []
    for option in node.get("options") or []:
        if isinstance(option, dict):
            options.append(FieldOption(id=require_str(option, "id"), name=require_str(option, "name")))
    return ClassificationField(id=require_str(node, "id"), name=require_str(node, "name"), options=options)


def decode_field(data: dict[str, Any]) -> FieldLookupResult:
    """Decode a field-by-name lookup; a null or empty field means "no field"."""
    project = require_dict(data, "node")
    field = project.get("field")
    if not isinstance(field, dict) or not field.get("id"):
        return FieldLookupResult()
    return FieldLookupResult(field=decode_field_node(field))


def decode_items_page(data: dict[str, Any]) -> ItemsPageResult:
    project = require_dict(data, "node")
    nodes = require_list(require_dict(project, "items"), "nodes")
    items = [RemoteItem(id=require_str(node, "id")) for node in nodes if isinstance(node, dict)]
    return ItemsPageResult(items=items)


def decode_created_field(data: dict[str, Any]) -> ClassificationField:
    payload = require_dict(data, "createProjectV2Field")
    return decode_field_node(require_dict(payload, "projectV2Field"))


def decode_draft_item(data: dict[str, Any]) -> RemoteItem:
    payload = require_dict(data, "addProjectV2DraftIssue")
    return RemoteItem(id=require_str(require_dict(payload, "projectItem"), "id"))
