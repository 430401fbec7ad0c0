"""GATK germline short variant discovery, wired step by step.

ClassFlow: BwaIndex -> Faidx -> CreateSequenceDictionary
    -> (per sample) BwaMem -> AddReadGroup -> IndexBam -> HaplotypeCaller
    -> CombineGVCFs -> GenotypeGVCFs
"""
from luigi.util import requires

from jointcall import tasks


class BwaIndex(tasks.BwaIndex):
    """Reference index for bwa mem"""
    def requires(self):
        return []


class Faidx(tasks.Faidx):
    """Reference .fai, after the bwa index"""
    def requires(self):
        return BwaIndex(reference=self.reference)


class CreateSequenceDictionary(tasks.CreateSequenceDictionary):
    """Reference .dict, after the .fai"""
    def requires(self):
        return Faidx(reference=self.reference)


class BwaMem(tasks.BwaMem):
    """Mapping to the prepared reference"""
    def requires(self):
        return CreateSequenceDictionary(reference=self.reference)


@requires(BwaMem)
class AddReadGroup(tasks.AddReadGroup):
    """Read group tagging of the sorted bam"""


@requires(AddReadGroup)
class IndexBam(tasks.IndexBam):
    """Index of the tagged bam"""


@requires(IndexBam)
class HaplotypeCaller(tasks.HaplotypeCaller):
    """Per-sample GVCF from the tagged, indexed bam"""


class CombineGVCFs(tasks.CombineGVCFs):
    """Cohort GVCF; the per-sample GVCFs are finished before it is scheduled"""
    def requires(self):
        return []


@requires(CombineGVCFs)
class GenotypeGVCFs(tasks.GenotypeGVCFs):
    """Joint calls from the cohort GVCF"""
