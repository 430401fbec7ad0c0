"""
Pytest configuration and fixtures for jointcall tests.
"""

import os

import pytest

from jointcall import paths
from jointcall.errors import ExternalToolError
from jointcall.tasks import reset_run


@pytest.fixture(autouse=True)
def fresh_run():
    """Every test starts without tasks finished by an earlier build."""
    reset_run()
    yield
    reset_run()


# ============================================================================
# Reference and Manifest Fixtures
# ============================================================================

@pytest.fixture
def reference(tmp_path):
    """A tiny reference fasta."""
    path = tmp_path / "ref.fa"
    path.write_text(">chr1\nACGTACGTACGTACGT\n")
    return str(path)


@pytest.fixture
def write_manifest(tmp_path):
    """Factory fixture writing a manifest from (name, forward, reverse) rows."""
    def _write(rows, name="samples.tsv"):
        path = tmp_path / name
        path.write_text("".join("\t".join(row) + "\n" for row in rows))
        return str(path)
    return _write


# ============================================================================
# Fake External Tools
# ============================================================================

class FakeTools:
    """Stands in for run_tool and run_pipe.

    Records every invocation and creates the file the real tool would
    write. Steps listed in ``fail`` raise ExternalToolError instead.
    """

    def __init__(self):
        self.calls = []
        self.fail = set()

    def steps(self):
        return [step for step, _ in self.calls]

    def run_tool(self, args, step):
        args = [str(arg) for arg in args]
        self.calls.append((step, args))
        if step in self.fail:
            raise ExternalToolError(step, args, returncode=1)
        outputs = self._outputs(args)
        if "CreateSequenceDictionary" in args and os.path.exists(outputs[0]):
            # picard will not overwrite an existing dictionary
            raise ExternalToolError(step, args, returncode=1)
        for output in outputs:
            with open(output, "w") as handle:
                handle.write(step)

    def run_pipe(self, stages, destination, step):
        stages = [[str(arg) for arg in args] for args in stages]
        self.calls.append((step, stages))
        if step in self.fail:
            raise ExternalToolError(step, stages[-1], returncode=1)
        with open(destination, "w") as handle:
            handle.write("sorted bam")

    @staticmethod
    def _outputs(args):
        if args[1:2] == ["index"] and args[0] == "bwa":
            return [paths.bwa_index(args[2])]
        if args[1:2] == ["faidx"]:
            return [paths.fasta_index(args[2])]
        if "CreateSequenceDictionary" in args:
            return [paths.sequence_dictionary(args[args.index("-R") + 1])]
        if args[1:2] == ["index"]:
            return [paths.bam_index(args[2])]
        if "-o" in args:
            return [args[args.index("-o") + 1]]
        if "-O" in args:
            return [args[args.index("-O") + 1]]
        return []


@pytest.fixture
def fake_tools(monkeypatch):
    """Patch every step module to use FakeTools."""
    fake = FakeTools()
    for module in ("reference", "mapping", "call_variants"):
        monkeypatch.setattr(
            "jointcall.tasks.{}.run_tool".format(module), fake.run_tool)
    monkeypatch.setattr("jointcall.tasks.mapping.run_pipe", fake.run_pipe)
    return fake
