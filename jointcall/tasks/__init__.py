from .core import GATKTask, reset_run, first_failure
from .tools import Tools
from .reference import BwaIndex, Faidx, CreateSequenceDictionary
from .mapping import SampleTask, BwaMem, AddReadGroup, IndexBam
from .call_variants import HaplotypeCaller, CombineGVCFs, GenotypeGVCFs
