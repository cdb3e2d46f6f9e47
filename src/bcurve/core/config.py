from typing import *

import os
import yaml


class YamlLimitedSafeLoader(type):
    """Meta YAML loader that skips the resolution of the specified YAML tags."""
    def __new__(cls, name, bases, namespace, do_not_resolve: List[str]) -> Type[yaml.SafeLoader]:
        do_not_resolve = set(do_not_resolve)
        implicit_resolvers = {
            key: [(tag, regex) for tag, regex in mappings if tag not in do_not_resolve]
            for key, mappings in yaml.SafeLoader.yaml_implicit_resolvers.items()
        }
        return super().__new__(
            cls,
            name,
            (yaml.SafeLoader, *bases),
            {**namespace, "yaml_implicit_resolvers": implicit_resolvers},
        )


class YamlNoTimestampSafeLoader(
    metaclass=YamlLimitedSafeLoader, do_not_resolve={"tag:yaml.org,2002:timestamp"}
):
    """A safe YAML loader that leaves timestamps as strings."""
    pass


class dotdict(dict):
    """
    dot.notation access to dictionary attributes
    """
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

    def __getattr__(self, item):
        try:
            return self[item]
        except KeyError:
            return self.__getattribute__(item)

    @classmethod
    def create(cls, cfg: Any):
        """
        - recursively replace all dicts by the dotdict.
        """
        if isinstance(cfg, dict):
            items = ((k, cls.create(v)) for k, v in cfg.items())
            return dotdict(items)
        elif isinstance(cfg, list):
            return [cls.create(i) for i in cfg]
        elif isinstance(cfg, tuple):
            return tuple([cls.create(i) for i in cfg])
        else:
            return cfg

    @staticmethod
    def serialize(cfg):
        """
        Convert back to plain dicts and lists, as accepted by yaml.safe_dump.
        """
        if isinstance(cfg, (dict, dotdict)):
            return {k: dotdict.serialize(v) for k, v in cfg.items()}
        elif isinstance(cfg, (list, tuple)):
            return [dotdict.serialize(i) for i in cfg]
        else:
            return cfg


def default_config() -> dotdict:
    return dotdict.create({
        'sampling': {
            # number of parameter subintervals used by Curve.sample
            'n_divisions': 256,
        },
    })


def _overlay(base: dotdict, update: Dict[str, Any]) -> dotdict:
    new_cfg = dotdict(base)
    for key, val in update.items():
        if isinstance(val, dict) and isinstance(base.get(key, None), dict):
            new_cfg[key] = _overlay(base[key], val)
        else:
            new_cfg[key] = dotdict.create(val)
    return new_cfg


def load_config(path) -> dotdict:
    """
    Load YAML configuration from given file, overlay it over the default configuration
    and replace dictionaries by dotdict.
    """
    cfg_dir = os.path.dirname(path)
    with open(path) as f:
        cfg = yaml.load(f, Loader=YamlNoTimestampSafeLoader)
    if cfg is None:
        cfg = {}
    dd = _overlay(default_config(), cfg)
    dd['_config_root_dir'] = os.path.abspath(cfg_dir)
    return dd


def dump_config(config, path="__config_resolved.yaml"):
    with open(path, "w") as f:
        yaml.safe_dump(dotdict.serialize(config), f)
