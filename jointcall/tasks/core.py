import luigi
import logging
from datetime import datetime, timedelta

# logging
rootlogger = logging.getLogger("root")
timelogger = logging.getLogger("ptime")

# task ids finished in this process, see GATKTask.complete
_finished = set()
# (task, exception) in the order luigi reported them
_failures = []


def reset_run():
    """Forget finished and failed tasks, so the next build starts fresh."""
    _finished.clear()
    del _failures[:]


def first_failure():
    """Return the (task, exception) that stopped the run, or None."""
    return _failures[0] if _failures else None


##################################################
## Class Definition
##################################################
class GATKTask(luigi.Task):
    """Base class of every workflow step.

    A step is complete only once it has succeeded in the current run and
    its outputs exist. Artifacts left over from an earlier run are never
    taken as done; the step runs again and overwrites them.

    Attributes:
        reference (str): reference fasta path
    """
    resources = {"cpu": 1}
    reference = luigi.Parameter()

    def requires(self):
        raise NotImplementedError("Task Need to implement requires function")

    def complete(self):
        return self.task_id in _finished and super().complete()

    @property
    def step(self):
        return self.__class__.__name__


##################################################
## Callbacks for execution
##################################################
@GATKTask.event_handler(luigi.Event.START)
def start_time(task):
    text = 'Task:{task}\tStartTime:{time}'.format(
        task = task.task_id,
        time = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    )
    rootlogger.info(text)


@GATKTask.event_handler(luigi.Event.SUCCESS)
def end_time(task):
    _finished.add(task.task_id)
    text = 'Task:{task}\tEndTime:{time}'.format(
        task = task.task_id,
        time = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    )
    rootlogger.info(text)


@GATKTask.event_handler(luigi.Event.PROCESSING_TIME)
def execution_time(task, processing_time):
    end = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    start = (datetime.now() - timedelta(seconds = processing_time)).strftime('%Y-%m-%d %H:%M:%S')
    text = "Task:{task}\t{ptime:.1f}min\tStarted:{start}\tEnded:{end}".format(
        task = task.task_id,
        ptime = processing_time / 60,
        start = start,
        end = end
    )
    timelogger.info(text)


@GATKTask.event_handler(luigi.Event.FAILURE)
def failure(task, exception):
    _failures.append((task, exception))
    text = 'Task:{task}\tFailed:{error}'.format(
        task = task.task_id, error = exception
    )
    rootlogger.error(text)
