import luigi
from .core import GATKTask
from .tools import Tools
from ..command import run_tool
from .. import paths


class BwaIndex(GATKTask):
    """Build the bwa index of the reference

    Output:
        - {reference}.amb .ann .bwt .pac .sa
    """

    def output(self):
        return luigi.LocalTarget(paths.bwa_index(self.reference))

    def run(self):
        run_tool([Tools().bwa, "index", self.reference], self.step)


class Faidx(GATKTask):
    """Random-access index of the reference

    Output:
        - {reference}.fai
    """

    def output(self):
        return luigi.LocalTarget(paths.fasta_index(self.reference))

    def run(self):
        run_tool([Tools().samtools, "faidx", self.reference], self.step)


class CreateSequenceDictionary(GATKTask):
    """Sequence dictionary required by GATK

    Output:
        - {reference stem}.dict
    """

    def output(self):
        return luigi.LocalTarget(paths.sequence_dictionary(self.reference))

    def run(self):
        # picard refuses to overwrite a dictionary left by an earlier run
        if self.output().exists():
            self.output().remove()
        run_tool(
            [Tools().picard, "CreateSequenceDictionary", "-R", self.reference],
            self.step,
        )
