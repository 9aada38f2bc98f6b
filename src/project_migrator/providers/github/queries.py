"""GraphQL query and mutation constants for the GitHub provider."""

FETCH_ORGANIZATION_ID = """
query($login: String!) {
  organization(login: $login) { id }
}
"""

FETCH_USER_ID = """
query($login: String!) {
  user(login: $login) { id }
}
"""

CREATE_PROJECT = """
mutation($ownerId: ID!, $title: String!) {
  createProjectV2(input: {ownerId: $ownerId, title: $title}) {
    projectV2 { id url }
  }
}
"""

FETCH_REPOSITORY_ID = """
query($owner: String!, $name: String!) {
  repository(owner: $owner, name: $name) { id }
}
"""

LINK_REPOSITORY = """
mutation($projectId: ID!, $repositoryId: ID!) {
  linkProjectV2ToRepository(input: {projectId: $projectId, repositoryId: $repositoryId}) {
    repository { id }
  }
}
"""

CREATE_FIELD = """
mutation(
  $projectId: ID!,
  $name: String!,
  $dataType: ProjectV2CustomFieldType!,
  $singleSelectOptions: [ProjectV2SingleSelectFieldOptionInput!]
) {
  createProjectV2Field(input: {
    projectId: $projectId,
    name: $name,
    dataType: $dataType,
    singleSelectOptions: $singleSelectOptions
  }) {
    projectV2Field {
      ... on ProjectV2Field { id name }
      ... on ProjectV2IterationField { id name }
      ... on ProjectV2SingleSelectField { id name options { id name } }
    }
  }
}
"""

FETCH_FIELD_BY_NAME = """
query($projectId: ID!, $name: String!) {
  node(id: $projectId) {
    ... on ProjectV2 {
      field(name: $name) {
        ... on ProjectV2Field { id name }
        ... on ProjectV2IterationField { id name }
        ... on ProjectV2SingleSelectField { id name options { id name } }
      }
    }
  }
}
"""

ADD_PROJECT_ITEM = """
mutation($projectId: ID!, $contentId: ID!) {
  addProjectV2ItemById(input: {projectId: $projectId, contentId: $contentId}) {
    item { id }
  }
}
"""

ADD_DRAFT_ISSUE = """
mutation($projectId: ID!, $title: String!, $body: String!) {
  addProjectV2DraftIssue(input: {projectId: $projectId, title: $title, body: $body}) {
    projectItem { id }
  }
}
"""

ARCHIVE_PROJECT_ITEM = """
mutation($projectId: ID!, $itemId: ID!) {
  archiveProjectV2Item(input: {projectId: $projectId, itemId: $itemId}) {
    item { id }
  }
}
"""

UPDATE_PROJECT_FIELD = """
mutation($projectId: ID!, $itemId: ID!, $fieldId: ID!, $value: ProjectV2FieldValue!) {
  updateProjectV2ItemFieldValue(input: {
    projectId: $projectId,
    itemId: $itemId,
    fieldId: $fieldId,
    value: $value
  }) {
    projectV2Item { id }
  }
}
"""

FETCH_ISSUE_OR_PULL_REQUEST = """
query($owner: String!, $name: String!, $number: Int!) {
  repository(owner: $owner, name: $name) {
    issueOrPullRequest(number: $number) {
      ... on Issue { id title }
      ... on PullRequest { id title }
    }
  }
}
"""

FETCH_RATE_LIMIT = """
query {
  rateLimit { limit remaining used resetAt }
}
"""
