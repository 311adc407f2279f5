"""Wrappers that translate, scale, rotate or displace input points before querying a noise source."""