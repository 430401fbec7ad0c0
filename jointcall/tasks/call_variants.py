import luigi
from .core import GATKTask
from .mapping import SampleTask
from .tools import Tools
from ..command import run_tool
from .. import paths


def gatk_command(tool, memory_gb):
    return [Tools().gatk, "--java-options", "-Xmx{}g".format(memory_gb), tool]


class HaplotypeCaller(SampleTask):
    """GATK HaplotypeCaller in GVCF mode

    Records reference confidence at every position, not only variant
    sites, so the sample can be genotyped jointly later.

    Attributes:
        memory_gb (int): java heap in gigabytes

    Output:
        * {prefix}_{sample}.g.vcf.gz
    """
    resources = {"cpu": 1, "memory": 1}
    memory_gb = luigi.IntParameter(default=8)

    def output(self):
        return luigi.LocalTarget(paths.sample_gvcf(self.prefix, self.sample))

    def run(self):
        cmd = gatk_command("HaplotypeCaller", self.memory_gb) + [
            "-R", self.reference,
            "-I", paths.read_group_bam(self.prefix, self.sample),
            "-O", self.output().path,
            "--sample-name", self.sample,
            "-ERC", "GVCF",
        ]
        run_tool(cmd, self.step)


class CombineGVCFs(GATKTask):
    """Merge per-sample GVCFs into one cohort GVCF

    Attributes:
        prefix (str): output prefix
        gvcfs (list): per-sample GVCFs, in manifest order
        memory_gb (int): java heap in gigabytes

    Output:
        * {prefix}.g.vcf.gz
    """
    resources = {"cpu": 1, "memory": 1}
    prefix = luigi.Parameter()
    gvcfs = luigi.ListParameter()
    memory_gb = luigi.IntParameter(default=8)

    def output(self):
        return luigi.LocalTarget(paths.combined_gvcf(self.prefix))

    def run(self):
        cmd = gatk_command("CombineGVCFs", self.memory_gb) + [
            "-R", self.reference,
            "-O", self.output().path,
        ]
        for gvcf in self.gvcfs:
            cmd += ["--variant", gvcf]
        run_tool(cmd, self.step)


class GenotypeGVCFs(GATKTask):
    """Joint genotyping of the cohort GVCF

    Attributes:
        prefix (str): output prefix
        memory_gb (int): java heap in gigabytes

    Output:
        * {prefix}.vcf.gz
    """
    resources = {"cpu": 1, "memory": 1}
    prefix = luigi.Parameter()
    memory_gb = luigi.IntParameter(default=8)

    def output(self):
        return luigi.LocalTarget(paths.joint_vcf(self.prefix))

    def run(self):
        cmd = gatk_command("GenotypeGVCFs", self.memory_gb) + [
            "-R", self.reference,
            "-V", paths.combined_gvcf(self.prefix),
            "-O", self.output().path,
        ]
        run_tool(cmd, self.step)
