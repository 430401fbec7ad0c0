"""Errors raised by the joint-calling workflow.

Every error carries enough context (step, tool, file) to act on it; none of
them is recovered from locally. They travel up to ``main`` which logs the
first one and exits non-zero.
"""


class JointCallError(Exception):
    """Base class for all workflow errors."""


class ManifestError(JointCallError):
    """Malformed or unreadable sample manifest.

    Attributes:
        path (str): manifest path
        row (int): 1-based record number of the offending row, if any
        fields (list): fields parsed from the offending row, if any
    """

    def __init__(self, message, path, row=None, fields=None):
        self.path = path
        self.row = row
        self.fields = list(fields) if fields is not None else None
        if row is not None:
            message = "{} record {}: {}".format(path, row, message)
        else:
            message = "{}: {}".format(path, message)
        super().__init__(message)


class ExternalToolError(JointCallError):
    """An external tool exited non-zero, was killed, or could not start.

    Attributes:
        step (str): workflow step the tool was run for
        argv (list): full argument vector, tool first
        returncode (int): exit status; negative when killed by a signal,
            None when the tool never started
        launch_error (OSError): set when the tool could not be launched
    """

    def __init__(self, step, args, returncode=None, launch_error=None):
        self.step = step
        self.argv = list(args)
        self.returncode = returncode
        self.launch_error = launch_error
        super().__init__(self._describe())

    @property
    def tool(self):
        return self.argv[0] if self.argv else ""

    def _describe(self):
        if self.launch_error is not None:
            outcome = "could not be launched ({})".format(self.launch_error)
        elif self.returncode is not None and self.returncode < 0:
            outcome = "was killed by signal {}".format(-self.returncode)
        else:
            outcome = "exited with status {}".format(self.returncode)
        return "{step}: {tool} {outcome}; command: {cmd}".format(
            step=self.step, tool=self.tool, outcome=outcome,
            cmd=" ".join(self.argv),
        )


class ArtifactError(JointCallError):
    """An output file could not be created, flushed or closed."""

    def __init__(self, step, path, cause):
        self.step = step
        self.path = path
        self.cause = cause
        super().__init__("{}: cannot write {}: {}".format(step, path, cause))
