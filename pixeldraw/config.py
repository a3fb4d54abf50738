"""
Settings for the pixeldraw driver, read from environment variables with
defaults.

Usage:
    from pixeldraw.config import config
    width, height = config.WIDTH, config.HEIGHT
"""
import os

_TRUE_VALUES = ('true', '1', 'yes')
_FALSE_VALUES = ('false', '0', 'no')


def _int_from_env(name, default):
    return int(os.getenv(name, str(default)))


class Config:

    @property
    def WIDTH(self) -> int:
        """Display width in pixels"""
        return _int_from_env('PIXELDRAW_WIDTH', 1024)

    @property
    def HEIGHT(self) -> int:
        """Display height in pixels"""
        return _int_from_env('PIXELDRAW_HEIGHT', 1024)

    @property
    def OUTPUT(self) -> str:
        """Screenshot name, without the .ppm extension"""
        return os.getenv('PIXELDRAW_OUTPUT', 'output')

    @property
    def TRANSPOSE(self) -> bool:
        """Whether draw_pixel(x, y) writes row x, column y"""
        value = os.getenv('PIXELDRAW_TRANSPOSE', 'true').lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise ValueError(f'PIXELDRAW_TRANSPOSE must be one of '
                         f'{", ".join(_TRUE_VALUES + _FALSE_VALUES)}, got {value!r}')

    def validate(self, skip=()) -> list:
        """
        Check the configuration.

        Args:
            skip: Names of settings (e.g. 'WIDTH') that the caller overrides
                  and which are therefore not checked.

        Returns:
            A list of problems, empty when the configuration is usable.
        """
        issues = []
        for name in ('WIDTH', 'HEIGHT'):
            if name in skip:
                continue
            try:
                value = getattr(self, name)
            except ValueError:
                issues.append(f'PIXELDRAW_{name} must be an integer')
                continue
            if value < 0:
                issues.append(f'PIXELDRAW_{name} must be non-negative, got {value}')
        if 'OUTPUT' not in skip and not self.OUTPUT:
            issues.append('PIXELDRAW_OUTPUT must not be empty')
        if 'TRANSPOSE' not in skip:
            try:
                self.TRANSPOSE
            except ValueError as e:
                issues.append(str(e))
        return issues


config = Config()
