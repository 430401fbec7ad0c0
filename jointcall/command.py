"""Running external tools.

Tool output is never captured: stdout and stderr go straight to the
operator's terminal so tool-native progress logging stays visible during
long steps. Only the exit condition is inspected.
"""
import shlex
import logging
import subprocess

from .errors import ArtifactError, ExternalToolError

rootlogger = logging.getLogger("root")
cmdlogger = logging.getLogger("cmd")


def format_command(args):
    return " ".join(shlex.quote(str(arg)) for arg in args)


def run_tool(args, step):
    """Run one external tool and wait for it.

    Args:
        args (list): tool followed by its arguments
        step (str): step name used in logs and errors

    Raises:
        ExternalToolError: non-zero exit, signal death, or launch failure
    """
    args = [str(arg) for arg in args]
    cmd = format_command(args)
    rootlogger.info(cmd)
    cmdlogger.info(cmd)
    try:
        process = subprocess.run(args)
    except OSError as e:
        raise ExternalToolError(step, args, launch_error=e) from e
    if process.returncode != 0:
        raise ExternalToolError(step, args, returncode=process.returncode)


def _abort(processes):
    for process in processes:
        process.kill()
    for process in processes:
        process.wait()


def run_pipe(stages, destination, step):
    """Run stages as one shell-style pipeline writing into destination.

    Every stage is launched before any is waited for, so each consumes its
    predecessor's output while it is being produced. Stages are then waited
    for in launch order and the first failure in that order is raised, even
    if a later stage actually died first.

    Args:
        stages (list): argument lists, one per stage
        destination (str): file receiving the last stage's stdout
        step (str): step name used in logs and errors

    Raises:
        ExternalToolError: a stage exited non-zero, was killed or did not start
        ArtifactError: destination could not be created, flushed or closed
    """
    stages = [[str(arg) for arg in args] for args in stages]
    cmd = "{} > {}".format(
        " | ".join(format_command(args) for args in stages),
        shlex.quote(destination),
    )
    rootlogger.info(cmd)
    cmdlogger.info(cmd)
    try:
        output = open(destination, "wb")
    except OSError as e:
        raise ArtifactError(step, destination, e) from e

    processes = []
    try:
        with output:
            upstream = None
            for i, args in enumerate(stages):
                last = i == len(stages) - 1
                try:
                    process = subprocess.Popen(
                        args, stdin=upstream,
                        stdout=output if last else subprocess.PIPE,
                    )
                except OSError as e:
                    _abort(processes)
                    raise ExternalToolError(step, args, launch_error=e) from e
                finally:
                    # the child holds its own copy; closing ours lets the
                    # producer see SIGPIPE if the consumer dies
                    if upstream is not None:
                        upstream.close()
                processes.append(process)
                upstream = process.stdout
            for process in processes:
                process.wait()
            output.flush()
    except OSError as e:
        _abort(processes)
        raise ArtifactError(step, destination, e) from e

    for args, process in zip(stages, processes):
        if process.returncode != 0:
            raise ExternalToolError(step, args, returncode=process.returncode)
