#!/usr/bin/env python

"""
Copyright (c) 2010-2022 VMware, Inc.  All rights reserved.

This module is used to test logging setup
"""

import io
import logging
import logging.handlers
import os
import shutil
import sys
import tempfile
import unittest
from optparse import OptionParser
from unittest import mock

from pyRemoveMo.logUtils import LoggingFactory


class TestLoggingFactory(unittest.TestCase):
   ## Setup
   #
   def setUp(self):
      self.rootLogger = logging.getLogger()
      self.savedLevel = self.rootLogger.level
      self.savedHandlers = list(self.rootLogger.handlers)
      self.tmpDir = tempfile.mkdtemp()

   ## tearDown
   #
   def tearDown(self):
      for handler in list(self.rootLogger.handlers):
         if handler not in self.savedHandlers:
            self.rootLogger.removeHandler(handler)
            handler.close()
      self.rootLogger.setLevel(self.savedLevel)
      shutil.rmtree(self.tmpDir)

   def Parse(self, args):
      parser = OptionParser()
      LoggingFactory.AddOptions(parser)
      (options, _) = parser.parse_args(args)
      return LoggingFactory.ParseOptions(options)

   def test_DefaultStderr(self):
      handler = self.Parse([])
      self.assertIsInstance(handler, logging.StreamHandler)
      self.assertIs(handler.stream, sys.stderr)
      self.assertEqual(self.rootLogger.level, logging.WARNING)

   def test_Stdout(self):
      handler = self.Parse(["-L", "-", "--loglevel", "info"])
      self.assertIs(handler.stream, sys.stdout)
      self.assertEqual(handler.level, logging.INFO)

   def test_LogFile(self):
      logFile = os.path.join(self.tmpDir, "remove.log")
      handler = self.Parse(["--logfile", logFile, "--loglevel", "debug"])
      self.assertIsInstance(handler, logging.handlers.RotatingFileHandler)
      logging.debug("written")
      handler.flush()
      with open(logFile) as f:
         self.assertIn("written", f.read())

   def test_Syslog(self):
      with mock.patch("logging.handlers.SysLogHandler") as sysLogHandler:
         handler = self.Parse(["--syslogident", "removemo",
                               "--loglevel", "info"])
      # Syslog only: no stream handler
      self.assertIsNone(handler)
      sysLogHandler.assert_called_once_with('/dev/log')
      syslog = sysLogHandler.return_value
      self.assertIn(syslog, self.rootLogger.handlers)
      syslog.setLevel.assert_called_once_with(logging.INFO)
      (formatter,), _ = syslog.setFormatter.call_args
      self.assertEqual(formatter._fmt,
                       '%(asctime)s removemo[%(process)d]: %(threadName)s: '
                       '%(message)s')

   def test_SyslogUnavailable(self):
      with mock.patch("logging.handlers.SysLogHandler",
                      side_effect=OSError("no /dev/log")), \
           mock.patch("sys.stderr", new_callable=io.StringIO) as err:
         handler = self.Parse(["--syslogident", "removemo"])
      self.assertIsNone(handler)
      self.assertIn("Configuring logging to syslog failed", err.getvalue())
      added = [h for h in self.rootLogger.handlers
               if h not in self.savedHandlers]
      self.assertEqual(len(added), 1)
      self.assertIsInstance(added[0], logging.NullHandler)

   def test_FatalIsCritical(self):
      self.Parse(["--loglevel", "fatal"])
      self.assertEqual(self.rootLogger.level, logging.CRITICAL)


if __name__ == "__main__":
   unittest.main()
