"""Frontends that host a :class:`~console_editor.shell.MenuSession`."""
