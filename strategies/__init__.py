import os
import inspect
import importlib
from .core import HeapSorter

STRATEGY_REGISTRY = {}

strategies_dir = os.path.dirname(__file__)
for file in os.listdir(strategies_dir):
    if not file.startswith('_') and not file.startswith('.') and file.endswith('.py'):
        module_name = file[:file.find('.py')]
        module = importlib.import_module('strategies.' + module_name)
        clsmembers = inspect.getmembers(module, inspect.isclass)
        for name, _cls in clsmembers:
            if issubclass(_cls, HeapSorter) and not _cls == HeapSorter:
                if not hasattr(_cls, 'name'):
                    raise ValueError("All strategy classes must have `name` attribute. Culprit: {}".format(name))
                else:
                    STRATEGY_REGISTRY[_cls.name] = _cls
