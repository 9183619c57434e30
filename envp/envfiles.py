"""
ABOUTME: Loads layered .env files into the process environment
ABOUTME: Follows the .env.<env>.local > .env.local > .env.<env> > .env precedence convention
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv

DEFAULT_ENV = "development"

logger = logging.getLogger("envp.envfiles")


def env_file_candidates(env: Optional[str] = None) -> List[str]:
    """
    Return the .env file names to load for an environment, highest precedence first.

    Parameters:
        env (str, optional): Environment name such as "development", "test" or "production". Empty means "development".

    Returns:
        List[str]: File names relative to the directory being loaded.
    """
    env = env or DEFAULT_ENV
    candidates = [f".env.{env}.local"]
    # .env.local never applies to the test environment
    if env != "test":
        candidates.append(".env.local")
    candidates.append(f".env.{env}")
    candidates.append(".env")
    return candidates


def load_env_from_env_files(
    env: Optional[str] = None, directory: Optional[Union[str, Path]] = None
) -> List[Path]:
    """
    Load .env files into os.environ without overriding variables that are already set.

    Files are loaded in precedence order, so the first file to define a key wins
    and anything already in the process environment beats every file. Missing
    files are skipped.

    Parameters:
        env (str, optional): Environment name. Empty or None means "development".
        directory (str | Path, optional): Directory holding the files. Defaults to the current working directory.

    Returns:
        List[Path]: The files that existed and were loaded, in load order.
    """
    base = Path(directory) if directory is not None else Path.cwd()
    loaded = []
    for name in env_file_candidates(env):
        env_path = base / name
        if not env_path.is_file():
            continue
        load_dotenv(env_path, override=False)
        logger.debug(f"Loaded environment from {env_path}")
        loaded.append(env_path)
    return loaded
