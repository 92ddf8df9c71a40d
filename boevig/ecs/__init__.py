"""Component storage, equality indices and the entity database that joins them."""