class SecretFeature:
    name = "secret-feature"

    def resolve(self, scope):
        return True
