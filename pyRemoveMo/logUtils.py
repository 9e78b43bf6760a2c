"""
Copyright (c) 2010-2022 VMware, Inc.  All rights reserved.
"""

import logging
import logging.handlers
import os.path
import sys
import traceback

class LoggingFactory:
   logFormat = "%(asctime)s [%(processName)s %(levelname)s '%(name)s' %(threadName)s] %(message)s"
   logSizeMB = 1
   numFiles = 2

   logLevelMap = {'fatal': logging.CRITICAL,
                  'critical': logging.CRITICAL,
                  'error': logging.ERROR,
                  'warning': logging.WARNING,
                  'info': logging.INFO,
                  'debug': logging.DEBUG}

   @staticmethod
   def AddOptions(parser, defaultLogFile=None, defaultLogLevel='warning',
                  defaultIdent=None):
      parser.add_option('-L', '--logfile', dest='logfile', default=defaultLogFile,
                        help='Log file name, - for standard output')
      parser.add_option('--loglevel', dest='loglevel', default=defaultLogLevel,
                        choices=list(LoggingFactory.logLevelMap.keys()),
                        help='Log level')
      parser.add_option('--syslogident', dest='syslogident',
                        default=defaultIdent, help='Syslog Ident')

   @staticmethod
   def ParseOptions(options):
      logLevel = LoggingFactory.logLevelMap.get(options.loglevel,
                                                logging.WARNING)

      maxBytes = LoggingFactory.logSizeMB * 1024 * 1024
      backupCount = LoggingFactory.numFiles - 1

      # Set root logger config
      rootLogger = logging.getLogger()
      rootLogger.setLevel(logLevel)

      if options.syslogident:
         try:
            # Log to syslog
            defaultAddress = '/dev/log'
            fmt = '%(asctime)s ' + options.syslogident + '[%(process)d]: %(threadName)s: %(message)s'
            datefmt = "%b %d %H:%M:%S"
            syslogFormatter = logging.Formatter(fmt=fmt, datefmt=datefmt)
            syslogHandler = logging.handlers.SysLogHandler(defaultAddress)
            syslogHandler.setLevel(logLevel)
            syslogHandler.setFormatter(syslogFormatter)
            rootLogger.addHandler(syslogHandler)
         except (OSError, IOError):
            print('Configuring logging to syslog failed: %s' \
                  % traceback.format_exc(), file=sys.stderr)
            # Drop log messages rather than fail the command
            rootLogger.addHandler(logging.NullHandler())

      handler = None

      if not options.logfile:
         if not options.syslogident:
            # No logfile specified: log to standard error
            handler = logging.StreamHandler(sys.stderr)
      elif options.logfile == '-':
         # Log to standard output
         handler = logging.StreamHandler(sys.stdout)
      else:
         # Log to specified logfile
         logFile = os.path.normpath(options.logfile)
         handler = logging.handlers.RotatingFileHandler(filename=logFile,
                                                        maxBytes=maxBytes,
                                                        backupCount=backupCount)

      if handler:
         handler.setLevel(logLevel)
         formatter = logging.Formatter(LoggingFactory.logFormat)
         handler.setFormatter(formatter)
         rootLogger.addHandler(handler)
      return handler
