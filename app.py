#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import tkinter as tk

from core.debug_utils import install_debugger
from services.dashboard_service import DashboardService
from services.timer_service import TimerService
from ui.main_window import MainWindow


def main():
    install_debugger()

    root = tk.Tk()

    timer_service = TimerService(scheduler=root)
    dashboard = DashboardService(timer_service)
    logging.getLogger(__name__).info("starting, calendar anchored at %s", dashboard.anchor)

    app = MainWindow(root, timer_service, dashboard)
    app.run()


if __name__ == "__main__":
    main()
