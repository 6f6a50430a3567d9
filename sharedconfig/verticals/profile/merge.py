"""
Combine the profiles of a config file and a credentials file.
"""

import copy

from sharedconfig.verticals.profile.assembler import Profile, ProfileMap


def merge_profile_maps(config: ProfileMap, credentials: ProfileMap) -> ProfileMap:
    """
    Merge two profile maps into a new one.

    Profiles present in both files are combined property by property, the
    credentials file winning when both define the same key. Neither input
    is modified.
    """
    merged: ProfileMap = copy.deepcopy(config)
    for name, profile in credentials.items():
        target = merged.setdefault(name, Profile(name))
        for key, prop in profile.properties.items():
            target.properties[key] = copy.deepcopy(prop)
    return merged
