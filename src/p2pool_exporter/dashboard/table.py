from __future__ import annotations

from p2pool_exporter.models.state_models import NetworkState, StratumState

PAGE_TITLE = "Local Monero P2Pool stratum"

TABLE_TEMPLATE = """<html lang="en">

<head>
    <title>Monero P2Pool stats</title>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <link rel="stylesheet" href="https://maxcdn.bootstrapcdn.com/bootstrap/4.5.0/css/bootstrap.min.css">
    <script src="https://maxcdn.bootstrapcdn.com/bootstrap/4.5.0/js/bootstrap.min.js"></script>
</head>
<div class="container-fluid">
    <div class="row">
        <div class="col-md-12">
            <h1>{page_title}</h1> <h2> {timestamp}</h2>
        </div>
    </div>

    <div class="row">
        <div class="col-md-6">
            <table class="table table-striped">
                <thead>
                    <tr>
                        <th scope="col">Hashrate [KH/s]</th>
                    </tr>
                </thead>
                <tbody>
                    <tr>
                        <td>15m</td>
                        <td>{hash_rate_15m}</td>
                    </tr>
                    <tr>
                        <td>1h</td>
                        <td>{hash_rate_1h}</td>
                    </tr>
                    <tr>
                        <td>24h</td>
                        <td>{hash_rate_24h}</td>
                    </tr>
                </tbody>
            </table>
        </div>
    </div>

    <div class="row">
        <div class="col-md-6">
            <table class="table table-striped">
                <thead>
                    <tr>
                        <th scope="col">Shares [blocks]</th>
                    </tr>
                </thead>
                <tbody>
                    <tr>
                        <td>found</td>
                        <td>{shares_found}</td>
                    </tr>
                    <tr>
                        <td>failed</td>
                        <td>{shares_failed}</td>
                    </tr>
                </tbody>
            </table>
        </div>
    </div>

    <div class="row">
        <div class="col-md-6">
            <table class="table table-striped">
                <thead>
                    <tr>
                        <th scope="col">Connections</th>
                    </tr>
                </thead>
                <tbody>
                    <tr>
                        <td>Outgoing</td>
                        <td>{connections}</td>
                    </tr>
                    <tr>
                        <td>Incoming</td>
                        <td>{incoming_connections}</td>
                    </tr>
                </tbody>
            </table>
        </div>
    </div>

</html>"""


def render_stratum_table(stratum: StratumState, network: NetworkState) -> str:
    return TABLE_TEMPLATE.format(
        page_title=PAGE_TITLE,
        timestamp=network.display_timestamp(),
        **stratum.model_dump(),
    )
