#!/usr/bin/env python
"""
Copyright (c) 2010-2022 VMware, Inc.  All rights reserved.

This module is the remove-managed-object setup file to generate a distributable
"""

from setuptools import setup

companyName = "VMware, Inc."
copyrightStr = "Copyright (c) 2010-2022 VMware, Inc.  All rights reserved."
regNameStr = 'remove-managed-object'
versionStr = '1.0.0'
descStr = 'Destroy or unregister a vSphere managed inventory object'
longDescStr = 'Command line tool that destroys or unregisters a host, ' \
              'virtual machine, folder, resource pool or datacenter ' \
              'through the vSphere API'

setup(name=regNameStr,
      version=versionStr,
      author=companyName,
      license=copyrightStr,
      description=descStr,
      long_description=longDescStr,
      packages=['pyRemoveMo'],
      python_requires='>=3.7',
      install_requires=['pyvmomi'],
      entry_points={
         'console_scripts': [
            'remove-managed-object = pyRemoveMo.main:main',
         ],
      },
     )
