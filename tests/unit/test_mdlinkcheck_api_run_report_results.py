from mdlinkcheck.api.LinkResult import LinkResult
from mdlinkcheck.api.LinkStatus import LinkStatus
from mdlinkcheck.api.OptionsBag import OptionsBag
from mdlinkcheck.api.run import report_results

ALIVE = LinkResult("https://example.com/ok", LinkStatus.ALIVE, 200)
DEAD = LinkResult("https://example.com/gone", LinkStatus.DEAD, 404)
IGNORED = LinkResult("http://localhost:8080", LinkStatus.IGNORED)
ERRORED = LinkResult("https://example.com/slow", LinkStatus.ERROR, 0, "timeout")


def test_all_alive_succeeds(recording_display):
    outcome = report_results("doc.md", [ALIVE, IGNORED], OptionsBag(), recording_display)

    assert outcome.failed is False
    assert outcome.total == 2
    assert recording_display.kinds("link") == [
        "[alive] https://example.com/ok",
        "[ignored] http://localhost:8080",
    ]
    assert recording_display.kinds("info") == ["\n  2 links checked."]
    assert recording_display.kinds("error") == []


def test_any_dead_link_fails_the_run(recording_display):
    outcome = report_results("doc.md", [ALIVE, IGNORED, ALIVE, DEAD], OptionsBag(), recording_display)

    assert outcome.failed is True
    assert outcome.dead == [DEAD]
    assert outcome.dead_count == 1
    assert recording_display.kinds("error") == ["\n  ERROR: 1 dead links found!"]
    # dead links are listed again with their status code
    assert recording_display.kinds("link")[-1] == "[dead] https://example.com/gone → Status: 404"


def test_error_status_links_do_not_fail_the_run(recording_display):
    outcome = report_results("doc.md", [ERRORED, IGNORED], OptionsBag(), recording_display)

    assert outcome.failed is False


def test_verbose_includes_status_and_diagnostic(recording_display):
    report_results("doc.md", [ALIVE, ERRORED], OptionsBag(verbose=True), recording_display)

    assert recording_display.kinds("link") == [
        "[alive] https://example.com/ok → Status: 200",
        "[error] https://example.com/slow → Status: 0 timeout",
    ]


def test_empty_results_print_notice(recording_display):
    outcome = report_results("doc.md", [], OptionsBag(), recording_display)

    assert outcome.failed is False
    assert recording_display.kinds("warning") == ["  No hyperlinks found!"]
    assert recording_display.kinds("info") == ["\n  0 links checked."]


def test_quiet_prints_only_dead_links_with_source_name(recording_display):
    outcome = report_results("doc.md", [ALIVE, DEAD, IGNORED], OptionsBag(quiet=True), recording_display)

    assert outcome.failed is True
    assert recording_display.lines == [
        ("error", "\n  ERROR: 1 dead links found in doc.md !"),
        ("link", "[dead] https://example.com/gone → Status: 404"),
    ]


def test_quiet_without_dead_links_prints_nothing(recording_display):
    report_results("doc.md", [], OptionsBag(quiet=True), recording_display)
    report_results("doc.md", [ALIVE, IGNORED], OptionsBag(quiet=True), recording_display)

    assert recording_display.lines == []


def test_quiet_summary_names_stdin_when_unnamed(recording_display):
    report_results(None, [DEAD], OptionsBag(quiet=True), recording_display)

    assert recording_display.kinds("error") == ["\n  ERROR: 1 dead links found in stdin !"]


def test_quiet_verbose_lists_dead_links_inline(recording_display):
    report_results("doc.md", [ALIVE, DEAD], OptionsBag(quiet=True, verbose=True), recording_display)

    assert recording_display.lines == [
        ("link", "[dead] https://example.com/gone → Status: 404"),
        ("error", "\n  ERROR: 1 dead links found in doc.md !"),
        ("link", "[dead] https://example.com/gone → Status: 404"),
    ]
