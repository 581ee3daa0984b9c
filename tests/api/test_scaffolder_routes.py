"""Scaffolder action discovery and execution routes."""

from httpx import AsyncClient


async def test_list_actions(client: AsyncClient) -> None:
    response = await client.get("/api/v1/scaffolder/actions")

    assert response.status_code == 200
    assert response.json() == {
        "actions": [{"id": "drn:pending:list", "description": "Lists pending DRN documents"}]
    }


async def test_run_drn_action_without_input(client: AsyncClient) -> None:
    response = await client.post("/api/v1/scaffolder/actions/drn:pending:list/run")

    assert response.status_code == 200
    body = response.json()
    assert body["action_id"] == "drn:pending:list"
    assert body["output"]["status"] == "SUCCESS"
    documents = body["output"]["documents"]
    assert [d["drn"] for d in documents] == ["DRN001", "DRN003", "DRN004"]
    assert documents[0]["approve_url"] == (
        "https://portal.example.com/create/templates/default/drn-approval?drn=DRN001"
    )


async def test_run_drn_action_include_approved(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/scaffolder/actions/drn:pending:list/run",
        json={"includeApproved": True},
    )

    assert len(response.json()["output"]["documents"]) == 5


async def test_run_with_invalid_input_is_400(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/scaffolder/actions/drn:pending:list/run",
        json={"includeApproved": "sometimes"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["details"] == {"field": "input"}


async def test_run_unknown_action_is_404(client: AsyncClient) -> None:
    response = await client.post("/api/v1/scaffolder/actions/drn:unknown/run", json={})

    assert response.status_code == 404
    assert response.json()["error"] == "ACTION_NOT_FOUND"
