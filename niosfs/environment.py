import logging
from fastcore.basics import AttrDict

from .core import FilesystemWrapper
from .errors import NoRunContextError

logger = logging.getLogger(__name__)

RUN_CONTEXTS = ('runs_from_home_screen', 'runs_in_action_extension', 'runs_in_app',
                'runs_in_notification', 'runs_in_widget', 'runs_with_siri')


class ScriptConfig(AttrDict):
    """Where the script believes it is running. At least one `runs_*` flag must be set."""
    def __init__(self, **kwargs):
        super().__init__({k: False for k in RUN_CONTEXTS}, widget_family=None)
        self.update(kwargs)


class ScriptArgs(AttrDict):
    """Arguments handed to the script by a share sheet, shortcut, widget or notification"""
    def __init__(self, **kwargs):
        super().__init__(plain_texts=[], urls=[], file_urls=[], images=[], query_parameters={},
                         shortcut_parameter=None, widget_parameter=None, notification=None)
        self.update(kwargs)


class Environment:
    """Everything a script under test sees: its args, its config and a fake filesystem.

    When no filesystem is given each environment gets its own basic one
    (`root` with `local` and `iCloud`).
    """
    def __init__(self, args, config, filesystem=None):
        self._args = args
        self._config = config
        self._filesystem = filesystem if filesystem is not None else FilesystemWrapper.basic_filesystem()

    @property
    def args(self): return self._args

    @property
    def config(self): return self._config

    @property
    def filesystem(self): return self._filesystem

    def run(self, script_main):
        """Validate the config, then call `script_main` and return its result"""
        self.check_config()
        logger.debug("Running %s", getattr(script_main, '__name__', script_main))
        return script_main()

    def get_env(self):
        return AttrDict(args=self._args, config=self._config, filesystem=self._filesystem)

    def check_config(self):
        """Raise `NoRunContextError` unless some running context is selected"""
        if not any(self._config.get(k) for k in RUN_CONTEXTS):
            logger.warning("Config selects no running context: %r", self._config)
            raise NoRunContextError()
