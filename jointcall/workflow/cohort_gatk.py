import luigi
import logging

from jointcall import paths
from jointcall.manifest import read_manifest
from jointcall.tasks import GATKTask
from .gatk import CreateSequenceDictionary, HaplotypeCaller, GenotypeGVCFs

rootlogger = logging.getLogger("root")


class JointGenotype(GATKTask):
    """Joint genotyping of every sample in a manifest

    Process: prepare reference -> load manifest -> for each sample in
    manifest order: map, tag, index, call GVCF -> combine GVCFs -> genotype.

    Each stage waits for the previous one to finish. Samples are yielded one
    at a time, so sample N+1 is only scheduled once sample N has its GVCF,
    and the first failure leaves everything after it unscheduled.

    Attributes:
        reference (str): reference fasta path
        manifest (str): tab separated name, forward fastq, reverse fastq
        prefix (str): output prefix
        threads (int): bwa mem threads
        memory_gb (int): GATK java heap in gigabytes

    Output:
        * {prefix}.vcf.gz
    """
    manifest = luigi.Parameter()
    prefix = luigi.Parameter(default="out")
    threads = luigi.IntParameter(default=1)
    memory_gb = luigi.IntParameter(default=8)

    def requires(self):
        return CreateSequenceDictionary(reference=self.reference)

    def output(self):
        return luigi.LocalTarget(paths.joint_vcf(self.prefix))

    def run(self):
        # luigi re-enters run() after every yield; everything before the
        # pending yield must be safe to repeat
        read_sets = read_manifest(self.manifest)
        if not read_sets:
            rootlogger.warning(
                "Manifest {} lists no samples, combining zero GVCFs".format(
                    self.manifest))

        gvcfs = []
        for read_set in read_sets:
            gvcf = yield HaplotypeCaller(
                reference=self.reference, prefix=self.prefix,
                sample=read_set.name, forward=read_set.forward,
                reverse=read_set.reverse, threads=self.threads,
                memory_gb=self.memory_gb,
            )
            gvcfs.append(gvcf.path)

        yield GenotypeGVCFs(
            reference=self.reference, prefix=self.prefix, gvcfs=gvcfs,
            memory_gb=self.memory_gb,
        )
