import luigi
from .core import GATKTask
from .tools import Tools
from ..command import run_pipe, run_tool
from .. import paths


class SampleTask(GATKTask):
    """A step for one sample

    Attributes:
        reference (str): reference fasta path
        prefix (str): output prefix
        sample (str): sample name
        forward (str): forward fastq path
        reverse (str): reverse fastq path
    """
    prefix = luigi.Parameter()
    sample = luigi.Parameter()
    forward = luigi.Parameter()
    reverse = luigi.Parameter()

    @property
    def step(self):
        return "{}[{}]".format(self.__class__.__name__, self.sample)


class BwaMem(SampleTask):
    """BWA Mapping

    bwa mem | samtools view -bS | samtools sort, streamed into the sorted
    bam. The bam only appears under its final name once all three stages
    succeeded.

    Attributes:
        threads (int): bwa mem threads

    Output:
        * {prefix}_{sample}.bam
    """
    resources = {"cpu": 1, "memory": 1}
    threads = luigi.IntParameter(default=1)

    def output(self):
        return luigi.LocalTarget(paths.sorted_bam(self.prefix, self.sample))

    def run(self):
        tools = Tools()
        stages = [
            [tools.bwa, "mem", self.reference, self.forward, self.reverse,
             "-t", self.threads],
            [tools.samtools, "view", "-bS"],
            [tools.samtools, "sort"],
        ]
        # temporary_path refuses to replace a bam left by an earlier run
        if self.output().exists():
            self.output().remove()
        with self.output().temporary_path() as bam:
            run_pipe(stages, bam, self.step)


class AddReadGroup(SampleTask):
    """Tag the alignments with the sample's read group (ID and SM)

    Output:
        * {prefix}_{sample}_rg.bam
    """

    def output(self):
        return luigi.LocalTarget(paths.read_group_bam(self.prefix, self.sample))

    def run(self):
        read_group = "@RG\tID:{sample}\tSM:{sample}".format(sample=self.sample)
        run_tool(
            [Tools().samtools, "addreplacerg", "-r", read_group,
             paths.sorted_bam(self.prefix, self.sample),
             "-o", self.output().path],
            self.step,
        )


class IndexBam(SampleTask):
    """Index the read group tagged bam

    Output:
        * {prefix}_{sample}_rg.bam.bai
    """

    def output(self):
        return luigi.LocalTarget(paths.bam_index(
            paths.read_group_bam(self.prefix, self.sample)))

    def run(self):
        run_tool(
            [Tools().samtools, "index",
             paths.read_group_bam(self.prefix, self.sample)],
            self.step,
        )
