"""
hdpath cli configuration

Defaults may be overridden by ~/.hdpath/config.toml (python 3.11+) or
~/.hdpath/config.json, e.g.

    {"log_level": "debug", "shape": "standard", "output_format": "bin"}

Options given explicitly on the command line take precedence over both.
"""
import copy
import json
import os

try:
    import tomllib

    HAS_TOMLLIB = True
except ImportError:
    HAS_TOMLLIB = False

DEFAULT_CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".hdpath")

SHAPES = ["custom", "account", "short", "standard"]
FORMATS = ["raw", "hex", "bin"]


class Config(object):
    def __init__(self, **kwargs):
        self.log_level = kwargs.get("log_level", "error")
        self.shape = kwargs.get("shape", "custom")

        self.input_format = kwargs.get("input_format", "hex")
        self.output_format = kwargs.get("output_format", "hex")

        if self.shape not in SHAPES:
            raise ValueError(f"unrecognized shape: {self.shape}")
        for format_ in [self.input_format, self.output_format]:
            if format_ not in FORMATS:
                raise ValueError(f"unrecognized format: {format_}")

    def load_config(self, config_dir: str = DEFAULT_CONFIG_DIR):
        """
        Look for configuration file in ~/.hdpath and load, if present
        """
        if HAS_TOMLLIB and os.path.exists(os.path.join(config_dir, "config.toml")):
            with open(os.path.join(config_dir, "config.toml"), "rb") as config_file:
                config_file_dict = tomllib.load(config_file)
        elif os.path.exists(os.path.join(config_dir, "config.json")):
            with open(os.path.join(config_dir, "config.json")) as config_file:
                config_file_dict = json.load(config_file)
        else:
            config_file_dict = {}

        if config_file_dict:
            # update config - current attrs updated with defined config file attrs
            # re __init__ to avoid applying invalid keys
            config_update = copy.deepcopy(vars(self))
            config_update.update(config_file_dict)
            self.__init__(**config_update)

    def update(self, **kwargs):
        """
        Update Config with kwargs

        Avoid applying keys not defined in __init__ by re-instantiating
        """
        updated_attrs = copy.deepcopy(vars(self))
        updated_attrs.update(kwargs)
        self.__init__(**updated_attrs)
