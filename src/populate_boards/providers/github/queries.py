"""GraphQL query and mutation documents for the GitHub Projects provider.

All documents are static; every value (ids, titles, bodies, option names) is
sent as a bound variable.
"""

FETCH_ORG_PROJECT = """
query($owner: String!, $number: Int!) {
  organization(login: $owner) {
    projectV2(number: $number) { id }
  }
}
"""

FETCH_USER_PROJECT = """
query($owner: String!, $number: Int!) {
  user(login: $owner) {
    projectV2(number: $number) { id }
  }
}
"""

FETCH_FIELD = """
query($projectId: ID!, $name: String!) {
  node(id: $projectId) {
    ... on ProjectV2 {
      field(name: $name) {
        ... on ProjectV2FieldCommon { id name }
        ... on ProjectV2SingleSelectField { id name options { id name } }
      }
    }
  }
}
"""

FETCH_PROJECT_ITEMS = """
query($projectId: ID!, $first: Int!) {
  node(id: $projectId) {
    ... on ProjectV2 {
      items(first: $first) {
        nodes { id }
      }
    }
  }
}
"""

UPDATE_PROJECT = """
mutation($projectId: ID!, $title: String!, $shortDescription: String!) {
  updateProjectV2(input: {projectId: $projectId, title: $title, shortDescription: $shortDescription}) {
    projectV2 { id }
  }
}
"""

DELETE_FIELD = """
mutation($fieldId: ID!) {
  deleteProjectV2Field(input: {fieldId: $fieldId}) {
    projectV2Field { ... on ProjectV2FieldCommon { id } }
  }
}
"""

CREATE_SINGLE_SELECT_FIELD = """
mutation($projectId: ID!, $name: String!, $options: [ProjectV2SingleSelectFieldOptionInput!]!) {
  createProjectV2Field(input: {
    projectId: $projectId,
    dataType: SINGLE_SELECT,
    name: $name,
    singleSelectOptions: $options
  }) {
    projectV2Field {
      ... on ProjectV2SingleSelectField { id name options { id name } }
    }
  }
}
"""

ADD_DRAFT_ISSUE = """
mutation($projectId: ID!, $title: String!, $body: String) {
  addProjectV2DraftIssue(input: {projectId: $projectId, title: $title, body: $body}) {
    projectItem { id }
  }
}
"""

UPDATE_ITEM_FIELD_VALUE = """
mutation($projectId: ID!, $itemId: ID!, $fieldId: ID!, $optionId: String!) {
  updateProjectV2ItemFieldValue(input: {
    projectId: $projectId,
    itemId: $itemId,
    fieldId: $fieldId,
    value: {singleSelectOptionId: $optionId}
  }) {
    projectV2Item { id }
  }
}
"""

_DELETE_ITEM_SELECTION = (
    "  delete{index}: deleteProjectV2Item(input: {{projectId: $projectId, itemId: $item{index}}}) "
    "{{ deletedItemId }}"
)


def build_delete_items_mutation(count: int) -> tuple[str, list[str]]:
    """Build one mutation deleting *count* project items.

    Aliases and variable names are derived from list positions only; the item
    ids themselves travel as variables.

    Returns:
        The mutation document and the item variable names, in order.
    """
    if count < 1:
        raise ValueError("count must be at least 1")
    names = [f"item{index}" for index in range(count)]
    params = ", ".join(["$projectId: ID!", *(f"${name}: ID!" for name in names)])
    selections = "\n".join(_DELETE_ITEM_SELECTION.format(index=index) for index in range(count))
    return f"mutation({params}) {{\n{selections}\n}}\n", names
