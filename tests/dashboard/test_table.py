from p2pool_exporter.dashboard.table import PAGE_TITLE, render_stratum_table
from p2pool_exporter.models.state_models import NetworkState, StratumState


def test_table_interpolates_state():
    stratum = StratumState(
        hash_rate_15m=10505000,
        hash_rate_1h=13794000,
        hash_rate_24h=24049000,
        shares_found=18,
        shares_failed=1,
        connections=2,
        incoming_connections=7,
    )
    page = render_stratum_table(stratum, NetworkState(timestamp=1682270152))

    assert f"<h1>{PAGE_TITLE}</h1>" in page
    assert "2023-04-23 17:15:52 UTC" in page
    for value in ("10505000", "13794000", "24049000", "18"):
        assert f"<td>{value}</td>" in page
    assert "<td>Incoming</td>\n                        <td>7</td>" in page
    assert page.startswith('<html lang="en">')
    assert "{" not in page.split("</head>", 1)[1]
