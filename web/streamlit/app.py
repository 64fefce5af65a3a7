"""Roundest Dashboard - leaderboard and head-to-head voting over the GraphQL API."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import httpx  # noqa: E402
import plotly.graph_objects as go  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

import settings  # noqa: E402
from web.gql import get_names  # noqa: E402

NAMES = get_names(settings.SCHEMA_NAMES)

RESULTS_QUERY = f"""
{{
  {NAMES.ranked_field} {{
    id name {NAMES.rank_field} upVotes downVotes totalVotes winPercentage lossPercentage
  }}
}}
"""

PAIR_QUERY = f"""
{{
  {NAMES.pair_field} {{
    {NAMES.first_field} {{ id name {NAMES.rank_field} }}
    {NAMES.second_field} {{ id name {NAMES.rank_field} }}
  }}
}}
"""

VOTE_MUTATION = f"""
mutation Vote($up: Int!, $down: Int!) {{
  {NAMES.vote_field}(upvoteId: $up, downvoteId: $down) {{ success }}
}}
"""

st.set_page_config(page_title="Roundest", page_icon="⚪", layout="wide")


def graphql(query: str, variables: dict | None = None) -> dict:
    """POST a GraphQL request; raise on transport or GraphQL errors."""
    resp = httpx.post(settings.GRAPHQL_URL, json={"query": query, "variables": variables}, timeout=10)
    payload = resp.json()
    if payload.get("errors"):
        raise RuntimeError("; ".join(e["message"] for e in payload["errors"]))
    resp.raise_for_status()
    return payload["data"]


@st.cache_data(ttl=5, show_spinner=False)
def get_results() -> list[dict]:
    return graphql(RESULTS_QUERY)[NAMES.ranked_field] or []


def get_pair() -> dict | None:
    return graphql(PAIR_QUERY)[NAMES.pair_field]


def win_chart(results: list[dict], top: int = 20) -> go.Figure:
    rows = results[:top]
    return go.Figure(
        go.Bar(
            x=[r["name"] for r in rows],
            y=[r["winPercentage"] for r in rows],
            text=[f"{r['winPercentage']:.1f}%" for r in rows],
            textposition="outside",
            marker_color="#DC2626",
        )
    ).update_layout(
        title=f"Top {len(rows)} by win percentage",
        yaxis_range=[0, 110],
        margin=dict(t=40, b=40, l=40, r=20),
        height=400,
    )


def vote_tab():
    """Head-to-head voting tab."""
    if "pair" not in st.session_state:
        st.session_state.pair = get_pair()

    pair = st.session_state.pair
    if pair is None:
        st.warning("Not enough Pokemon to vote on. Run `python sync_data.py` first.")
        return

    first, second = pair[NAMES.first_field], pair[NAMES.second_field]
    st.subheader("Which Pokemon is rounder?")
    cols = st.columns(2)
    for col, winner, loser in ((cols[0], first, second), (cols[1], second, first)):
        with col:
            st.markdown(f"### #{winner[NAMES.rank_field]} {winner['name'].title()}")
            if st.button("Rounder", key=f"vote_{winner['id']}"):
                graphql(VOTE_MUTATION, {"up": winner["id"], "down": loser["id"]})
                logger.info("Voted {} over {}", winner["name"], loser["name"])
                get_results.clear()
                st.session_state.pair = get_pair()
                st.rerun()


def results_tab():
    """Leaderboard tab."""
    results = get_results()
    if not results:
        st.info("No results yet.")
        return

    cols = st.columns(3)
    cols[0].metric("Pokemon", len(results))
    cols[1].metric("Votes cast", sum(r["upVotes"] for r in results))
    cols[2].metric("Roundest", results[0]["name"].title())

    st.plotly_chart(win_chart(results), width="stretch")
    st.dataframe(
        [
            {
                "Rank": i + 1,
                "Pokemon": r["name"].title(),
                "Dex": r[NAMES.rank_field],
                "Wins": r["upVotes"],
                "Losses": r["downVotes"],
                "Win %": round(r["winPercentage"], 1),
            }
            for i, r in enumerate(results)
        ],
        hide_index=True,
    )


def main():
    st.title("⚪ Roundest")
    st.markdown("*Vote for the roundest Pokemon*")

    tab1, tab2 = st.tabs(["🗳️ Vote", "🏆 Results"])

    try:
        with tab1:
            vote_tab()
        with tab2:
            results_tab()
    except (httpx.HTTPError, RuntimeError) as e:
        logger.error("API request failed: {}", e)
        st.error(f"API request failed: {e}")

    st.sidebar.markdown("---")
    st.sidebar.markdown(f"**API:** `{settings.GRAPHQL_URL}`")


if __name__ == "__main__":
    main()
