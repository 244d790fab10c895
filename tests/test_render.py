from webarchive.models import FAILED, ArchiveRecord
from webarchive.render import render_index, render_readme, write_indexes

RECORDS = {
    "https://example.com": ArchiveRecord("https://example.com", "2026-10-18", "archive/example.com/index.html"),
    "r/testsub": ArchiveRecord("r/testsub", FAILED, None),
}


def test_readme_lists_every_url(make_settings):
    readme = render_readme(RECORDS, make_settings())

    assert "| [https://example.com](archive/example.com/index.html) | 2026-10-18 |" in readme
    assert "| [r/testsub](#) | ❌ FAILED |" in readme


def test_readme_repository_links(make_settings):
    readme = render_readme(RECORDS, make_settings(branch="trunk"))

    assert "[View the archive](https://octo.github.io/web-archive/)" in readme
    assert "[Download ZIP](https://github.com/octo/web-archive/archive/refs/heads/trunk.zip)" in readme
    assert "[GitHub](https://github.com/octo/web-archive/issues)." in readme
    assert "## **Mirroring**" in readme


def test_readme_contact_email_is_optional(make_settings):
    assert "mailto:" not in render_readme(RECORDS, make_settings())

    readme = render_readme(RECORDS, make_settings(contact_email="archivist@example.org"))
    assert "Or you can [send an email](mailto:archivist@example.org)." in readme


def test_readme_table_is_followed_by_blank_line(make_settings):
    readme = render_readme({}, make_settings())
    assert "|---------|-------------------------|\n\n## **Mirroring**" in readme


def test_index_marks_failures(make_settings):
    page = render_index(RECORDS, make_settings())

    assert '<tr><td><a href="archive/example.com/index.html">https://example.com</a></td><td>2026-10-18</td></tr>' in page
    assert '<tr><td><a href="#">r/testsub</a></td><td class="failed">❌ FAILED</td></tr>' in page


def test_index_schedule_and_contact(make_settings):
    plain = render_index(RECORDS, make_settings())
    assert 'class="schedule"' not in plain
    assert "mailto:" not in plain

    page = render_index(RECORDS, make_settings(
        schedule_description="Refreshed every Sunday at 03:00 UTC.",
        contact_email="archivist@example.org",
    ))
    assert '<p class="schedule">Refreshed every Sunday at 03:00 UTC.</p>' in page
    assert '<a href="mailto:archivist@example.org">send an email</a>' in page


def test_index_escapes_html(make_settings):
    records = {"https://example.com/?a=1&b=<x>": ArchiveRecord("https://example.com/?a=1&b=<x>", FAILED, None)}
    page = render_index(records, make_settings(schedule_description="<script>alert(1)</script>"))

    assert "https://example.com/?a=1&amp;b=&lt;x&gt;" in page
    assert "<script>" not in page


def test_write_indexes_overwrites(make_settings, workdir):
    (workdir / "README.md").write_text("old readme", encoding="utf-8")
    (workdir / "index.html").write_text("old index", encoding="utf-8")

    write_indexes(RECORDS, make_settings())

    assert (workdir / "README.md").read_text(encoding="utf-8").startswith("# Web Archive\n")
    assert "old index" not in (workdir / "index.html").read_text(encoding="utf-8")
