# main.py
import logging

from cssbuild.config import DEFAULT_CONFIG_PATH
from cssbuild.io import DEFAULT_OUTPUT_PATH
from cssbuild.runner import run_pipeline


def main(config_path=DEFAULT_CONFIG_PATH, output_path=DEFAULT_OUTPUT_PATH):
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    return run_pipeline(str(config_path), str(output_path))


if __name__ == "__main__":
    main()
