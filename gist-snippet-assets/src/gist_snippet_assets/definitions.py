import dagster as dg

from gist_snippet_assets.defs.components import defs as component_defs
from gist_snippet_assets.defs.resources import defs as resource_defs

defs = dg.Definitions.merge(resource_defs, component_defs)
