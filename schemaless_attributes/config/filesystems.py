from __future__ import annotations

import os
from typing import Dict, Any

# Default filesystem disk
default = os.getenv('FILESYSTEM_DISK', 'local')

# Filesystem disks configuration
disks: Dict[str, Dict[str, Any]] = {
    'local': {
        'driver': 'local',
        'root': os.getenv('FILESYSTEM_ROOT', 'storage/app'),
    },
    
    # Memory filesystem (for testing)
    'memory': {
        'driver': 'memory',
    }
}
