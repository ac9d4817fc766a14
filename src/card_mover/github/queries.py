"""GraphQL documents for GitHub Projects (classic)."""

# Column and card limits are fixed; nothing beyond the first page is read.
COLUMN_LIMIT = 20
CARD_LIMIT = 5

COLUMNS_QUERY = f"""
query columns($owner: String!, $name: String!, $projectName: String!) {{
    repository(owner: $owner, name: $name) {{
        projects(search: $projectName, last: 1) {{
            edges {{
                node {{
                    columns(first: {COLUMN_LIMIT}) {{
                        edges {{
                            node {{
                                id
                                name
                            }}
                        }}
                    }}
                }}
            }}
        }}
    }}
}}
"""

PROJECT_CARDS_QUERY = f"""
query issues($issueId: ID!) {{
    node(id: $issueId) {{
        ... on Issue {{
            projectCards(first: {CARD_LIMIT}) {{
                edges {{
                    node {{
                        id
                    }}
                }}
            }}
        }}
    }}
}}
"""

MOVE_PROJECT_CARD_MUTATION = """
mutation updateProjectCard($cardId: ID!, $columnId: ID!) {
    moveProjectCard(input: { cardId: $cardId, columnId: $columnId }) {
        clientMutationId
    }
}
"""
