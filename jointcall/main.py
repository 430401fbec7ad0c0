import os
import sys
import argparse
import luigi
import luigi.configuration

from jointcall import __version__, paths
from jointcall.tasks import reset_run, first_failure
from jointcall.userlogger import set_logger
from jointcall.workflow import JointGenotype


def positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(
            "must be a positive integer, got {}".format(value))
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog='jointcall',
        description='Map paired-end samples with bwa and joint-genotype '
                    'them with GATK')
    parser.add_argument('-r', '--reference', required=True,
                        help='Path to reference .fa file (required)')
    parser.add_argument('-s', '--samples', required=True,
                        help='Path to tab-separated table containing pairs of '
                             'forward and reverse read paths, one line per '
                             'sample (required). Format: name (tab) '
                             'forward.fq.gz (tab) reverse.fq.gz')
    parser.add_argument('-o', '--outpre', default='out',
                        help='Output prefix, default is "out"')
    parser.add_argument('-t', '--threads', type=positive_int, default=1,
                        help='Threads to use, default is 1')
    parser.add_argument('-m', '--memory', type=positive_int, default=8,
                        help='Memory to use (integer, gigabytes), default is 8')
    parser.add_argument('--log-config',
                        help='logging.yaml replacing the packaged one')
    parser.add_argument('--version', action='version',
                        version='%(prog)s {}'.format(__version__))
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    rootlogger = set_logger(args.log_config)[0]

    outdir = os.path.dirname(os.path.abspath(args.outpre))
    os.makedirs(outdir, exist_ok=True)
    rootlogger.info(
        'Reference: {} Samples: {} Output prefix: {} Threads: {} Memory: {}g'.format(
            args.reference, args.samples, args.outpre, args.threads, args.memory))

    # logging.yaml already configured luigi-interface
    config = luigi.configuration.get_config()
    if not config.has_section('core'):
        config.add_section('core')
    config.set('core', 'no_configure_logging', 'true')

    # Luigi run joint genotyping, one task at a time in this process
    reset_run()
    succeeded = luigi.build(
        [JointGenotype(reference=args.reference, manifest=args.samples,
                       prefix=args.outpre, threads=args.threads,
                       memory_gb=args.memory)],
        workers=1,
        local_scheduler=True,
    )
    failure = first_failure()
    if failure is not None:
        task, error = failure
        rootlogger.critical('{} failed: {}'.format(task.task_id, error))
        return 1
    if not succeeded:
        rootlogger.critical('Joint genotyping did not complete')
        return 1
    rootlogger.info('Joint genotyped calls: {}'.format(paths.joint_vcf(args.outpre)))
    return 0


if __name__ == '__main__':
    sys.exit(main())
