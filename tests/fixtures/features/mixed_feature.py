"""Declared attributes and instance attributes that disagree."""

from hoist import Feature, description, feature_set, label, tags


@label("Attribute Label")
@description("Attribute Description")
@tags("attr-tag")
@feature_set("attr-set")
class MixedFeature(Feature):
    name = "mixed-feature"
    label = "Property Label"
    description = "Property Description"
    tags = ["prop-tag"]
    feature_set = "prop-set"

    def resolve(self, scope):
        return True
