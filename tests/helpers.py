"""HTML builders for canned release-server pages."""

BASE = "https://downloads.example.org"


def index_page(*entries: str) -> str:
    """Render a directory index like the release server's, with a parent link and a file row."""
    rows = ['<tr><td class="n"><a href="../">Parent directory</a>/</td><td class="s">-</td></tr>']
    for entry in entries:
        label = entry.rstrip("/")
        rows.append(f'<tr><td class="n"><a href="{entry}">{label}</a></td><td class="s">-</td></tr>')
    rows.append('<tr><td class="n"><a href="sha256sums">sha256sums</a></td><td class="s">1.2 KB</td></tr>')
    return (
        "<html><body><h1>Index of /</h1><hr><table>"
        '<tr><th class="n">File Name</th><th class="s">File Size</th></tr>'
        + "".join(rows)
        + "</table></body></html>"
    )


def packages_page(arch: str = "", *hrefs: str) -> str:
    """Render a package listing, optionally with the architecture label."""
    label = f"<p>Packages for architecture: {arch}</p>" if arch else ""
    links = "".join(f'<tr><td class="n"><a href="{h}">{h}</a></td></tr>' for h in hrefs)
    return f"<html><body><h1>Index of packages</h1>{label}<table>{links}</table></body></html>"

