"""Joint genotyping of paired-end samples with bwa, samtools and GATK."""

__version__ = "0.1.0"
