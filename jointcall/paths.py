"""Artifact naming.

All intermediate and final file names are derived here from the output
prefix and the sample name, so every step agrees on them.

Output::

    {prefix}_{sample}.bam           sorted alignment
    {prefix}_{sample}_rg.bam        read-group tagged alignment
    {prefix}_{sample}_rg.bam.bai    its index
    {prefix}_{sample}.g.vcf.gz      per-sample GVCF
    {prefix}.g.vcf.gz               combined GVCF
    {prefix}.vcf.gz                 joint-genotyped calls
"""
import os

FASTA_SUFFIXES = (".fasta.gz", ".fa.gz", ".fna.gz", ".fasta", ".fa", ".fna")


def sorted_bam(prefix, sample):
    return "{}_{}.bam".format(prefix, sample)


def read_group_bam(prefix, sample):
    return "{}_{}_rg.bam".format(prefix, sample)


def bam_index(bam):
    return bam + ".bai"


def sample_gvcf(prefix, sample):
    return "{}_{}.g.vcf.gz".format(prefix, sample)


def combined_gvcf(prefix):
    return "{}.g.vcf.gz".format(prefix)


def joint_vcf(prefix):
    return "{}.vcf.gz".format(prefix)


def bwa_index(reference):
    """The .bwt file is the last one `bwa index` writes."""
    return reference + ".bwt"


def fasta_index(reference):
    return reference + ".fai"


def sequence_dictionary(reference):
    """Picard writes the dictionary next to the fasta, extension replaced."""
    for suffix in FASTA_SUFFIXES:
        if reference.endswith(suffix):
            return reference[:-len(suffix)] + ".dict"
    return os.path.splitext(reference)[0] + ".dict"
