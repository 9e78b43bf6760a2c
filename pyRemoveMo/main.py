#!/usr/bin/env python
"""
Copyright (c) 2010-2022 VMware, Inc.  All rights reserved.

Destroy or Unregister a Managed Inventory Object like a Host, VM, Folder, etc

Remove a folder named Fold:
   remove-managed-object --url https://vc/sdk --username user --password pwd
      --objtype Folder --objname Fold

Unregister a virtual machine named VM1:
   remove-managed-object --url https://vc/sdk --username user --password pwd
      --objtype VirtualMachine --objname VM1 --operation unregister
"""
__author__ = "VMware, Inc"

import logging
import sys

from optparse import OptionParser, OptionGroup

from pyRemoveMo.connect import Connect
from pyRemoveMo.logUtils import LoggingFactory
from pyRemoveMo.options import RemoveOptions, SessionOptions
from pyRemoveMo.remove import RemoveManagedObject, ValidateInput


def GetOptionParser():
   """ Parser for the connection, request and logging options """
   parser = OptionParser(usage="%prog [options] --objtype TYPE --objname NAME",
                         description="Destroy or unregister a managed " \
                                     "inventory object like a host, vm, " \
                                     "folder, resource pool or datacenter")

   connGroup = OptionGroup(parser, "Connection options")
   connGroup.add_options(SessionOptions.GetOptParseOptions())
   parser.add_option_group(connGroup)

   parser.add_options(RemoveOptions.GetOptParseOptions())

   logGroup = OptionGroup(parser, "Logging options")
   LoggingFactory.AddOptions(logGroup)
   parser.add_option_group(logGroup)
   return parser


def main(argv=None):
   parser = GetOptionParser()
   (options, _) = parser.parse_args(argv)

   removeOptions = RemoveOptions(options)
   missing = removeOptions.GetMissing()
   if missing:
      parser.error("Missing required option(s): %s" %
                   ", ".join("--" + name for name in missing))

   LoggingFactory.ParseOptions(options)

   # Bad input never reaches the server
   ValidateInput(removeOptions.objtype, removeOptions.operation)

   si = Connect(SessionOptions(options))
   remover = RemoveManagedObject(si, removeOptions)
   succeeded = remover.Run()
   logging.info("%s %s : %s %s" % (remover.operation,
                                    removeOptions.objtype,
                                    removeOptions.objname,
                                    succeeded and "succeeded" or "failed"))
   return 0


# Start program
if __name__ == "__main__":
   sys.exit(main())
