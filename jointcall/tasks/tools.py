import luigi


class Tools(luigi.Config):
    """Software Settings

    Override in the [Tools] section of luigi.cfg when the executables are
    not on PATH under their usual names.

    Attributes:
        bwa (str): aligner, used for indexing and paired-end mapping
        samtools (str): faidx, view, sort, addreplacerg, index
        picard (str): CreateSequenceDictionary
        gatk (str): HaplotypeCaller, CombineGVCFs, GenotypeGVCFs
    """
    bwa = luigi.Parameter(default="bwa")
    samtools = luigi.Parameter(default="samtools")
    picard = luigi.Parameter(default="picard-tools")
    gatk = luigi.Parameter(default="gatk")
