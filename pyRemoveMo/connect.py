"""
Copyright (c) 2010-2022 VMware, Inc.  All rights reserved.

Connect to the vCenter Server or ESXi host named by the session options.
"""
__author__ = "VMware, Inc"

import atexit
import logging
import ssl

from pyVim.connect import SmartConnect, Disconnect
from pyVmomi import vim

from pyRemoveMo import RemoveLoginException


## Create ssl.SSLContext object based on the specified arguments.
#
#    If none of the arguments is set returns None.
#
# @param cacertsFile - if set use default SSL context with 'cafile'.
#                      This parameter overrides the parameter 'thumbprint'.
#
# @param thumbprint - if set use unverified SSL context.
#                     The server certificate is then checked by thumbprint.
#
def CreateSslContext(cacertsFile, thumbprint):
   context = None
   if cacertsFile:
      context = ssl.create_default_context(cafile=cacertsFile)
   elif thumbprint:
      context = ssl._create_unverified_context()
   return context


## Login to the server
#
# @param  sessionOptions SessionOptions
# @return the service instance
def Connect(sessionOptions):
   """ Connect and login, disconnecting at exit """
   host, port, protocol, path = sessionOptions.GetEndpoint()
   thumbprint = sessionOptions.thumbprint
   if thumbprint:
      thumbprint = thumbprint.replace(":", "").lower()
   context = CreateSslContext(sessionOptions.cacertsfile, thumbprint)

   logging.info("Connecting to %s://%s:%d%s as %s" %
                (protocol, host, port, path, sessionOptions.username))
   try:
      si = SmartConnect(protocol=protocol,
                        host=host,
                        port=port,
                        path=path,
                        user=sessionOptions.username,
                        pwd=sessionOptions.password,
                        thumbprint=thumbprint,
                        sslContext=context)
   except vim.fault.InvalidLogin as err:
      raise RemoveLoginException(err, message="Cannot complete login due " \
                                 "to an incorrect user name or password.")

   atexit.register(Disconnect, si)
   logging.debug("Connected to %s" % host)
   return si
