#!/usr/bin/env python
"""
Copyright (c) 2010-2022 VMware, Inc.  All rights reserved.

This module holds the command line, environment and config file options
for the connection and for the remove request.
"""
__author__ = "VMware, Inc"

import os
import sys
import logging
import urllib.parse

from optparse import make_option

from pyRemoveMo import RemoveArgumentException

__all__ = [
   "GetViSdkRcPath",
   "Option",
   "ParseURL",
   "RemoveOptions",
   "SessionOptions",
]


## Option class
#
class Option:
   """ Options accessor class """
   def __init__(self, name, env, default, helpMsg, action=None,
                shortname=None):
      """ Constructor """
      self.name = name
      self.shortname = shortname
      self.env = env
      self.default = default
      self.help = helpMsg
      self.action = action


## Get vi sdk rc file
#
# @return vi sdk rc file location
def GetViSdkRcPath():
   """ Get VI Sdk rc file path """
   if sys.platform == "win32":
      viSdkRc = "visdk.rc"
   else:
      viSdkRc = ".visdkrc"

   home = os.environ.get("HOME") or os.environ.get("LOGDIR")
   if home:
      viSdkRc = home + "/" + viSdkRc
   return viSdkRc


## Split a VI SDK url
#
# @param  url VI SDK url, e.g. https://vc.corp.local/sdk
# @return (host, port, protocol, path). All None if url is empty
def ParseURL(url):
   """ Split a VI SDK url into host, port, protocol and path """
   if not url:
      return None, None, None, None

   parsed = urllib.parse.urlparse(url)
   protocol = parsed.scheme
   host = parsed.hostname
   try:
      port = parsed.port
   except ValueError:
      raise RemoveArgumentException("Invalid port number in URL %s" % url)
   if not port:
      port = (protocol == "http") and 80 or 443
   return host, port, protocol, parsed.path


## Build optparse options from an Option list
#
def _MakeOptParseOptions(optionsList):
   options = []
   for option in optionsList:
      kwargs = { "default": None,
                 "dest"   : option.name,
                 "help"   : option.help }
      if option.action:
         kwargs["action"] = option.action
      args = ["--" + option.name]
      if option.shortname:
         args.append("-" + option.shortname)
      options.append(make_option(*args, **kwargs))
   return options


## Session options
#
class SessionOptions:
   """ Connection options  """

   OptionsList = [
      # Config file
      Option(name="config", shortname="c", env="VI_CONFIG",
             default=GetViSdkRcPath(),
             helpMsg="(variable VI_CONFIG) " \
                     "Location of the configuration file"),

      # Destination
      Option(name="server", shortname="s", env="VI_SERVER", default=None,
             helpMsg="(variable VI_SERVER) " \
                     "vCenter Server or ESXi host to connect to. " \
                     "Required if url is not present"),
      Option(name="portnumber", env="VI_PORTNUMBER", default="443",
             helpMsg="(variable VI_PORTNUMBER) " \
                     "Port used to connect to server"),
      Option(name="protocol", env="VI_PROTOCOL", default="https",
             helpMsg="(variable VI_PROTOCOL, default 'https') " \
                     "Protocol used to connect to the server (http / https). " \
                     "WARNING: using http is insecure."),
      Option(name="url", shortname="r", env="VI_URL", default=None,
             helpMsg="(variable VI_URL) " \
                     "VI SDK URL to connect to. " \
                     "Required if server is not present"),

      # User
      Option(name="username", shortname="u", env="VI_USERNAME", default=None,
             helpMsg="(variable VI_USERNAME) Username"),
      Option(name="password", shortname="p", env="VI_PASSWORD", default=None,
             helpMsg="(variable VI_PASSWORD) Password"),

      # Server certificate
      Option(name="cacertsfile", shortname="t", env="VI_CACERTFILE",
             default=None,
             helpMsg="(variable VI_CACERTFILE) CA certificates file"),
      Option(name="thumbprint", shortname="d", env="VI_THUMBPRINT",
             default=None,
             helpMsg="(variable VI_THUMBPRINT) " \
                     "Expected SHA-1/SHA-256/SHA-512 server certificate " \
                     "thumbprint, if CA certificates file is not provided"),
   ]

   ## Constructor
   #
   # @param  options Options from optparser
   def __init__(self, options):
      """ Constructor """
      for option in self.OptionsList:
         setattr(self, option.name, option.default)

      # Config file first, then environment variables, then command line
      if getattr(options, "config", None):
         configFileName = options.config
      else:
         configFileName = os.environ.get("VI_CONFIG")
         if not configFileName:
            configFileName = GetViSdkRcPath()
      if configFileName:
         self._ReadConfigFile(configFileName)

      for option in self.OptionsList:
         val = os.environ.get(option.env)
         if val is not None:
            setattr(self, option.name, val)

      for option in self.OptionsList:
         val = getattr(options, option.name, None)
         if val is not None:
            setattr(self, option.name, val)

   ## Get a list of optparser options
   #  Note: Do not log here. Logging is not yet setup
   #
   # @return optparser options
   @staticmethod
   def GetOptParseOptions():
      """ Get a list of optparser options """
      return _MakeOptParseOptions(SessionOptions.OptionsList)

   ## Resolve the endpoint to connect to
   #
   # @return (host, port, protocol, path)
   def GetEndpoint(self):
      """ Resolve host, port, protocol and service path """
      host, port, protocol, path = ParseURL(self.url)
      if host:
         return host, port, protocol, path or "/sdk"

      if not self.server:
         raise RemoveArgumentException("Must specify either url or server")
      try:
         port = int(self.portnumber)
      except (TypeError, ValueError):
         raise RemoveArgumentException(
            "Invalid port number %s" % self.portnumber)
      return self.server, port, self.protocol or "https", "/sdk"

   ## Set option from environment variable
   #
   # @param  env Environment variable name
   def _SetEnvOption(self, env, val):
      """ Set option from environment variable """
      for option in self.OptionsList:
         if option.env == env:
            setattr(self, option.name, val)
            break
      else: # for ... else
         logging.error("Unknown environment variable: " + env)

   ## Read options from config file
   #
   # @param  configFilename Config file name
   def _ReadConfigFile(self, configFileName):
      """ Read options from config file """
      try:
         with open(configFileName, "r") as configFile:
            for line in configFile:
               if line.startswith("#"):
                  continue
               keyVal = line.split("=", 1)
               if len(keyVal) != 2:
                  continue
               # Leading spaces are stripped from values, trailing are kept
               key, val = keyVal[0].strip(), keyVal[1].lstrip().rstrip("\r\n")
               if key:
                  self._SetEnvOption(key, val)
      except IOError:
         logging.info("Config file " + configFileName + " does not exist")


## Remove request options
#
class RemoveOptions:
   """ Object type, object name and operation of the request """

   OptionsList = [
      Option(name="objtype", env=None, default=None,
             helpMsg="type of managedobject to remove or unregister " \
                     "e.g. HostSystem, VirtualMachine, Folder, " \
                     "ResourcePool, Datacenter"),
      Option(name="objname", env=None, default=None,
             helpMsg="Name of the object"),
      Option(name="operation", env=None, default=None,
             helpMsg="Name of the operation - [remove | unregister]"),
   ]

   Required = ("objtype", "objname")

   def __init__(self, options=None, **kwargs):
      for option in self.OptionsList:
         val = getattr(options, option.name, None)
         setattr(self, option.name, kwargs.get(option.name, val))

   @staticmethod
   def GetOptParseOptions():
      """ Get a list of optparser options """
      return _MakeOptParseOptions(RemoveOptions.OptionsList)

   ## Names of the required options that were not given
   #
   def GetMissing(self):
      return [name for name in self.Required if not getattr(self, name)]

   def __repr__(self):
      return "RemoveOptions(objtype=%r, objname=%r, operation=%r)" % \
             (self.objtype, self.objname, self.operation)
