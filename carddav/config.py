import json
import logging
import os

"""
Reading of the connection configuration file used by get_davclient.

The file is JSON (or YAML, if pyyaml is installed) and contains
sections, each one a dict.  A section may "inherits" another section.
Connection parameters are keys prefixed with "carddav_", like:

    {"default": {"carddav_url": "https://carddav.example.com",
                 "carddav_user": "me", "carddav_pass": "hunter2"}}
"""


def config_section(config, section="default"):
    if section in config and "inherits" in config[section]:
        ret = config_section(config, config[section]["inherits"])
    else:
        ret = {}
    if section in config:
        ret.update(config[section])
    return ret


def connection_params(section):
    """Picks the carddav_ keys from a config section, as DAVClient parameters"""
    conn_params = {}
    for k in section:
        if k.startswith("carddav_") and section[k]:
            key = k[8:]
            if key == "pass":
                key = "password"
            if key == "user":
                key = "username"
            conn_params[key] = section[k]
    return conn_params


def read_config(fn):
    if not fn:
        cfgdir = f"{os.environ.get('HOME', '/')}/.config/"
        for config_file in (
            f"{cfgdir}/carddav/contacts.conf",
            f"{cfgdir}/carddav/contacts.yaml",
            f"{cfgdir}/carddav/contacts.json",
            "/etc/carddav/contacts.conf",
        ):
            cfg = read_config(config_file)
            if cfg:
                return cfg
        return None

    try:
        try:
            with open(fn, "rb") as config_file:
                return json.load(config_file)
        except json.decoder.JSONDecodeError:
            ## Late import, wrapped in try/except.  yaml is external module,
            ## and not included in the requirements as for now.
            try:
                import yaml

                try:
                    with open(fn, "rb") as config_file:
                        return yaml.load(config_file, yaml.Loader)
                except yaml.YAMLError:
                    logging.error(
                        f"config file {fn} exists but is neither valid json nor yaml.  Check the syntax."
                    )
            except ImportError:
                logging.error(
                    f"config file {fn} exists but is not valid json, and pyyaml is not installed."
                )

    except FileNotFoundError:
        logging.info("no config file found")
    except ValueError:
        logging.error("error in config file.  It will be ignored", exc_info=True)
    return {}
