"""Sample manifest reader.

The manifest is a headerless tab separated table, one sample per line::

    name<TAB>forward.fq.gz<TAB>reverse.fq.gz[<TAB>ignored...]

Blank lines are skipped and columns after the third are ignored.
"""
import os
import logging
import warnings
from collections import namedtuple

import pandas as pd

from . import paths
from .errors import ManifestError

rootlogger = logging.getLogger("root")

COLUMNS = ["name", "forward", "reverse"]

ReadSet = namedtuple("ReadSet", COLUMNS)
ReadSet.__doc__ = """Paired-end reads of one sample.

Attributes:
    name (str): sample name, also used for the read group and file names
    forward (str): forward (R1) fastq path
    reverse (str): reverse (R2) fastq path
"""


def _load_table(path):
    try:
        # python engine pads short rows instead of rejecting them,
        # index_col=False drops the trailing extra columns
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", pd.errors.ParserWarning)
            return pd.read_csv(
                path, sep="\t", header=None, names=COLUMNS, index_col=False,
                dtype=object, na_filter=False, skip_blank_lines=True,
                engine="python",
            )
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=COLUMNS)
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError("cannot read manifest: {}".format(e), path) from e
    except pd.errors.ParserError as e:
        raise ManifestError("cannot parse manifest: {}".format(e), path) from e


def _artifacts(name):
    return [
        paths.sorted_bam("", name),
        paths.read_group_bam("", name),
        paths.sample_gvcf("", name),
    ]


def _check_name(name, path, row, fields, owners):
    if name in ("", ".", "..") or os.sep in name or (
            os.altsep and os.altsep in name):
        raise ManifestError(
            "sample name {!r} cannot be used in output file names".format(name),
            path, row=row, fields=fields,
        )
    for artifact in _artifacts(name):
        if artifact in owners:
            other, other_row = owners[artifact]
            raise ManifestError(
                "sample name {!r} clashes with {!r} on record {}".format(
                    name, other, other_row),
                path, row=row, fields=fields,
            )


def read_manifest(path):
    """Parse the manifest into ReadSet records, in file order.

    Args:
        path (str): manifest path

    Returns:
        list: ReadSet per sample

    Raises:
        ManifestError: unreadable file, a row with fewer than three fields,
            or a sample name whose output files would be unsafe or shared
            with another sample
    """
    table = _load_table(path)
    read_sets = []
    owners = {}
    for row, values in enumerate(table.itertuples(index=False, name=None), 1):
        fields = [value for value in values if not pd.isna(value)]
        if len(fields) < len(COLUMNS):
            raise ManifestError(
                "expected {} tab separated fields, found {}: {}".format(
                    len(COLUMNS), len(fields), fields),
                path, row=row, fields=fields,
            )
        read_set = ReadSet(*fields)
        _check_name(read_set.name, path, row, fields, owners)
        for artifact in _artifacts(read_set.name):
            owners[artifact] = (read_set.name, row)
        read_sets.append(read_set)
    rootlogger.info("Manifest {} lists {} samples".format(path, len(read_sets)))
    return read_sets
