from .gatk import (
    BwaIndex, Faidx, CreateSequenceDictionary, BwaMem, AddReadGroup,
    IndexBam, HaplotypeCaller, CombineGVCFs, GenotypeGVCFs,
)
from .cohort_gatk import JointGenotype
