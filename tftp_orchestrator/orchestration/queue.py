#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.

"""Named, prioritised work items.

Items run in ascending priority, items of equal priority in creation
order. A failing item is recorded and the remaining items still run.
"""

import itertools

from oslo_log import log as logging

LOG = logging.getLogger(__name__)

PENDING = 'pending'
RUNNING = 'running'
COMPLETED = 'completed'
FAILED = 'failed'


class Task(object):
    """A queued call of ``action(*args, **kwargs)``."""

    def __init__(self, name, priority, action, args=(), kwargs=None):
        self.name = name
        self.priority = priority
        self.action = action
        self.args = args
        self.kwargs = kwargs or {}
        self.status = PENDING
        self.error = None

    def run(self):
        self.status = RUNNING
        try:
            result = self.action(*self.args, **self.kwargs)
        except Exception as e:
            self.status = FAILED
            self.error = e
            raise
        self.status = COMPLETED
        return result

    def __repr__(self):
        return '<Task %r priority=%s status=%s>' % (self.name, self.priority,
                                                     self.status)


class Queue(object):

    def __init__(self):
        self._items = []
        self._counter = itertools.count()

    def create(self, name, priority, action, *args, **kwargs):
        """Enqueue a work item.

        :returns: the created :class:`Task`.
        """
        task = Task(name, priority, action, args, kwargs)
        self._items.append((priority, next(self._counter), task))
        LOG.debug('Queued %s', task)
        return task

    def all(self):
        return [task for _p, _c, task in sorted(self._items,
                                                key=lambda i: i[:2])]

    def _with_status(self, status):
        return [task for task in self.all() if task.status == status]

    def pending(self):
        return self._with_status(PENDING)

    def completed(self):
        return self._with_status(COMPLETED)

    def failed(self):
        return self._with_status(FAILED)

    def clear(self):
        self._items = []

    def process(self):
        """Run every pending item.

        :returns: True if no item failed.
        """
        for task in self.pending():
            try:
                task.run()
            except Exception as e:
                LOG.error('Task "%(task)s" failed: %(error)s',
                          {'task': task.name, 'error': e})
            else:
                LOG.debug('Task "%s" completed', task.name)
        return not self.failed()

    def __iter__(self):
        return iter(self.all())

    def __len__(self):
        return len(self._items)
