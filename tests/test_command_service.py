"""Name-based dispatch and background workers."""

import time

from PyQt6.QtCore import QCoreApplication, QThreadPool

from aether_manager.utils.async_utils import Worker


class TestInvoke:
    def test_dispatches_by_name(self, configured, make_mod_source):
        result = configured.invoke(
            "install_mod", source_path=str(make_mod_source("Foo")), title="Foo"
        )
        assert result["success"]
        mod_id = result["data"].id

        assert configured.invoke("toggle_mod", mod_id=mod_id)["data"] is True
        assert configured.invoke("get_stats")["data"].active == 1

    def test_unknown_command(self, commands):
        result = commands.invoke("format_disk")
        assert not result["success"]
        assert result["error_kind"] == "validation"

    def test_bad_arguments(self, commands):
        result = commands.invoke("toggle_mod", wrong="x")
        assert result["error_kind"] == "validation"

    def test_private_attributes_not_reachable(self, commands):
        assert commands.invoke("_resolve", command="list_mods")["error_kind"] == "validation"


class TestWorker:
    def test_emits_result_then_finished(self):
        events = []
        worker = Worker(lambda x: x * 2, 21)
        worker.signals.result.connect(lambda value: events.append(("result", value)))
        worker.signals.finished.connect(lambda: events.append(("finished", None)))

        worker.run()

        assert events == [("result", 42), ("finished", None)]

    def test_emits_error_tuple(self):
        errors = []

        def boom():
            raise ValueError("bad")

        worker = Worker(boom)
        worker.signals.error.connect(errors.append)
        worker.run()

        exctype, value, tb = errors[0]
        assert exctype is ValueError
        assert "bad" in tb


class TestSubmit:
    def test_runs_command_on_thread_pool(self, configured, install):
        app = QCoreApplication.instance() or QCoreApplication([])
        mod = install("Foo")
        results = []

        configured.submit("toggle_mod", on_result=results.append, mod_id=mod.id)

        assert QThreadPool.globalInstance().waitForDone(10000)
        # Results queued back to this thread are delivered by the event loop
        deadline = time.monotonic() + 5
        while not results and time.monotonic() < deadline:
            app.processEvents()

        assert results == [{"success": True, "data": True}]
        assert configured.get_mod(mod.id)["data"].is_active is True
